"""
Prompt-context formatting.

Renders the tiered terms, competitor headings and questions into the text
block handed to the content generator.
"""

from typing import Optional, Sequence

from .config import SerpAnalysisConfig
from .models import SerpTerms


EMPTY_PLACEHOLDER = "Keine gefunden"

MUST_HAVE_LABEL = "PFLICHT-BEGRIFFE (in mindestens {must:.0%} der Top-Ergebnisse)"
SHOULD_HAVE_LABEL = "EMPFOHLENE BEGRIFFE (in {should:.0%} bis {must:.0%} der Top-Ergebnisse)"
NICE_TO_HAVE_LABEL = "OPTIONALE BEGRIFFE (ergänzend)"
HEADINGS_LABEL = "KONKURRENZ-ÜBERSCHRIFTEN (Inspiration)"
QUESTIONS_LABEL = "HÄUFIGE FRAGEN (People Also Ask)"


def _format_section(label: str, items: Sequence[str]) -> list[str]:
    lines = [f"{label}:"]
    if items:
        lines.extend(f"- {item}" for item in items)
    else:
        lines.append(f"- {EMPTY_PLACEHOLDER}")
    return lines


def format_prompt_context(
    keyword: str,
    serp_terms: SerpTerms,
    headings: Sequence[str],
    questions: Sequence[str],
    config: Optional[SerpAnalysisConfig] = None,
) -> str:
    """
    Build the human-readable SERP summary for the content prompt.

    Args:
        keyword: Focus keyword, shown in the header line.
        serp_terms: Tiered terms.
        headings: Competitor headings; the first prompt_heading_limit are shown.
        questions: Extracted questions; the first prompt_question_limit are shown.
        config: Analysis configuration.

    Returns:
        Multi-line text block. Empty sections read "- Keine gefunden".
    """
    config = config or SerpAnalysisConfig()
    thresholds = {
        "must": config.must_have_threshold,
        "should": config.should_have_threshold,
    }

    sections = [
        [f'SERP-ANALYSE für "{(keyword or "").strip()}":'],
        _format_section(MUST_HAVE_LABEL.format(**thresholds), serp_terms.must_have),
        _format_section(SHOULD_HAVE_LABEL.format(**thresholds), serp_terms.should_have),
        _format_section(NICE_TO_HAVE_LABEL, serp_terms.nice_to_have),
        _format_section(HEADINGS_LABEL, list(headings)[:config.prompt_heading_limit]),
        _format_section(QUESTIONS_LABEL, list(questions)[:config.prompt_question_limit]),
    ]

    return "\n\n".join("\n".join(lines) for lines in sections)
