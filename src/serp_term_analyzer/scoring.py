"""
Relevance scoring and focus-keyword exclusion.
"""

from typing import Mapping, Optional

from .config import SerpAnalysisConfig
from .models import ScoredTerm, TermStats
from .tokenizer import tokenize


def score_term(stats: TermStats, config: Optional[SerpAnalysisConfig] = None) -> int:
    """
    Compute the relevance score of a term.

    score = raw_frequency + title_weight * title_document_count
            + snippet_weight * snippet_document_count

    With the default weights a title hit is worth three snippet hits.
    """
    config = config or SerpAnalysisConfig()
    return (
        stats.raw_frequency
        + config.title_weight * stats.title_document_count
        + config.snippet_weight * stats.snippet_document_count
    )


def normalize_keyword(keyword: Optional[str], config: Optional[SerpAnalysisConfig] = None) -> str:
    """
    Bring a focus keyword into the same shape as extracted terms.

    The keyword runs through the tokenizer, so short words and punctuation
    are dropped exactly as they are for titles and snippets
    ("Laufschuhe im Test" becomes "laufschuhe test"). A keyword made only of
    short words falls back to its lowercased, whitespace-collapsed form.
    """
    if not keyword:
        return ""
    config = config or SerpAnalysisConfig()
    tokens = tokenize(keyword, min_length=config.min_token_length)
    if tokens:
        return " ".join(tokens)
    return " ".join(keyword.lower().split())


def overlaps_focus_keyword(term: str, normalized_keyword: str) -> bool:
    """
    Check whether a term re-surfaces the focus keyword.

    True when the keyword contains the term or the term contains the keyword.
    An empty keyword overlaps nothing.
    """
    if not normalized_keyword:
        return False
    return term in normalized_keyword or normalized_keyword in term


def rank_terms(
    table: Mapping[str, TermStats],
    keyword: Optional[str],
    config: Optional[SerpAnalysisConfig] = None,
) -> list[ScoredTerm]:
    """
    Score, filter, sort and truncate the term table.

    Args:
        table: Output of aggregate_term_stats().
        keyword: Focus keyword of the analysis.
        config: Analysis configuration.

    Returns:
        At most config.max_terms terms sorted by descending score. Ties keep
        the table's insertion order.
    """
    config = config or SerpAnalysisConfig()
    normalized = normalize_keyword(keyword, config)

    scored = [
        ScoredTerm.from_stats(stats, score_term(stats, config))
        for term, stats in table.items()
        if not overlaps_focus_keyword(term, normalized)
    ]
    # sorted() is stable, so equal scores stay in first-seen order
    scored = sorted(scored, key=lambda item: item.score, reverse=True)

    return scored[:config.max_terms]
