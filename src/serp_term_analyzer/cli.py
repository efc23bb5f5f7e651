"""
Command-line interface for the SERP term analyzer.

Analyzes search results exported from a search provider (JSON, CSV or Excel)
and prints the tiered competitor vocabulary.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .analyzer import analyze_serp
from .config import SerpAnalysisConfig
from .models import SerpAnalysisResult, TermTier
from .serp_loader import SerpLoadError, load_serp_results

console = Console()
# Diagnostics and log records; stdout carries only the result
err_console = Console(stderr=True)

TIER_LABELS = {
    TermTier.MUST_HAVE: "Pflicht",
    TermTier.SHOULD_HAVE: "Empfohlen",
    TermTier.NICE_TO_HAVE: "Optional",
}


@click.command()
@click.argument("keyword")
@click.option(
    "--results",
    "-r",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Search results file (JSON provider payload, CSV or Excel).",
)
@click.option(
    "--sheet",
    type=str,
    default=None,
    help="Sheet name for Excel result files.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the JSON result to this file.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the JSON result instead of tables.",
)
@click.option(
    "--stopword",
    "extra_stopwords",
    multiple=True,
    help="Additional stopword to ignore (repeatable).",
)
@click.option(
    "--max-terms",
    type=click.IntRange(min=0),
    default=None,
    help="Number of ranked terms to keep (default: 30).",
)
@click.option(
    "--tier-cap",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum terms per tier (default: 10).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    keyword: str,
    results: Path,
    sheet: Optional[str],
    output: Optional[Path],
    as_json: bool,
    extra_stopwords: tuple[str, ...],
    max_terms: Optional[int],
    tier_cap: Optional[int],
    verbose: bool,
) -> None:
    """
    SERP Term Analyzer - Find the vocabulary top competitors rank with.

    Reads the top search results for KEYWORD and sorts the terms they use
    into must-have, should-have and nice-to-have tiers.

    Examples:

        serp-terms "laufschuhe" --results serp.json

        serp-terms "laufschuhe" -r top10.csv --json -o analysis.json
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    try:
        config = SerpAnalysisConfig.from_overrides(max_terms=max_terms, tier_cap=tier_cap)
        config = config.with_extra_stopwords(extra_stopwords)

        payload = load_serp_results(results, sheet_name=sheet)
        if verbose:
            err_console.print(f"  Loaded {len(payload.documents)} results from: {results}")

        result = analyze_serp(
            keyword,
            payload.documents,
            people_also_ask=payload.people_also_ask,
            related_searches=payload.related_searches,
            config=config,
        )

        if output:
            output.write_text(result.to_json(), encoding="utf-8")

        if as_json:
            click.echo(result.to_json())
        else:
            _display_result(result, verbose)
            if output:
                console.print(f"\n[bold green]Success![/bold green] Output saved to: {output}")

    except SerpLoadError as e:
        console.print(f"[red]Results loading error:[/red] {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]File error:[/red] {e}")
        sys.exit(1)


def _tier_label(result: SerpAnalysisResult, term: str) -> str:
    """Tier label of a term, or "-" if it fell outside the tier caps."""
    tier = result.serp_terms.tier_of(term)
    return TIER_LABELS[tier] if tier is not None else "-"


def _display_result(result: SerpAnalysisResult, verbose: bool) -> None:
    """Display the analysis as rich tables."""
    console.print(Panel.fit(
        f"[bold blue]SERP-Analyse[/bold blue] für \"{result.keyword}\"\n"
        f"{result.stats.total_results_analyzed} Ergebnisse analysiert, "
        f"{len(result.serp_terms.all)} relevante Begriffe",
        border_style="blue",
    ))

    tier_table = Table(title="Begriffe nach Priorität", show_header=True)
    tier_table.add_column("Tier", style="cyan")
    tier_table.add_column("Begriffe", style="green")

    tier_table.add_row(TIER_LABELS[TermTier.MUST_HAVE], ", ".join(result.serp_terms.must_have) or "-")
    tier_table.add_row(TIER_LABELS[TermTier.SHOULD_HAVE], ", ".join(result.serp_terms.should_have) or "-")
    tier_table.add_row(TIER_LABELS[TermTier.NICE_TO_HAVE], ", ".join(result.serp_terms.nice_to_have) or "-")
    console.print(tier_table)

    if verbose and result.stats.term_details:
        detail_table = Table(title="Term Details", show_header=True)
        detail_table.add_column("Term", style="green")
        detail_table.add_column("Tier", style="cyan")
        detail_table.add_column("Score", justify="right")
        detail_table.add_column("Titles", justify="right")
        detail_table.add_column("Snippets", justify="right")
        detail_table.add_column("Frequency", justify="right")

        for detail in result.stats.term_details:
            detail_table.add_row(
                detail.term,
                _tier_label(result, detail.term),
                str(detail.score),
                str(detail.in_titles),
                str(detail.in_snippets),
                str(detail.frequency),
            )
        console.print(detail_table)

    if result.questions.extracted:
        console.print(f"\n[cyan]Fragen gefunden:[/cyan] {len(result.questions.extracted)}")

    console.print("\n[bold]Prompt-Kontext[/bold]")
    console.print(result.prompt_context, markup=False, highlight=False)


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
