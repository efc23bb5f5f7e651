"""
Competitor heading collection and question extraction.

Questions come from the "people also ask" and "related searches" boxes of the
results page. Only genuine questions are kept: strings with a question mark
or that start with an interrogative ("W-Frage").
"""

from typing import Iterable, Optional, Sequence

from .config import DEFAULT_QUESTION_LEAD_WORDS, SerpAnalysisConfig
from .models import SearchResultDocument


def collect_headings(documents: Iterable[SearchResultDocument], limit: int = 5) -> list[str]:
    """
    Collect competitor titles for inspiration.

    Args:
        documents: Search results in rank order.
        limit: Maximum number of headings.

    Returns:
        Non-empty titles in document order, at most `limit`.
    """
    headings = [document.title.strip() for document in documents if document.title and document.title.strip()]
    return headings[:limit]


def dedupe_preserving_order(items: Optional[Iterable[str]]) -> list[str]:
    """
    Remove empty and duplicate strings, keeping the first spelling.

    Comparison ignores case and surrounding whitespace.
    """
    seen: set[str] = set()
    unique: list[str] = []

    for item in items or []:
        if item is None:
            continue
        text = str(item).strip()
        key = text.lower()
        if not text or key in seen:
            continue
        seen.add(key)
        unique.append(text)

    return unique


def is_question(text: str, lead_words: Sequence[str] = DEFAULT_QUESTION_LEAD_WORDS) -> bool:
    """
    Check whether a suggestion is a genuine question.

    Args:
        text: People-also-ask or related-search string.
        lead_words: Lowercase interrogative prefixes that mark a question.

    Returns:
        True if the text contains "?" or starts with one of the lead words.
    """
    if not text:
        return False
    if "?" in text:
        return True

    return text.strip().lower().startswith(tuple(lead_words))


def extract_questions(
    people_also_ask: Optional[Iterable[str]],
    related_searches: Optional[Iterable[str]],
    config: Optional[SerpAnalysisConfig] = None,
) -> list[str]:
    """
    Merge, deduplicate and filter question suggestions.

    Args:
        people_also_ask: Questions from the "people also ask" box.
        related_searches: Queries from the "related searches" box.
        config: Analysis configuration.

    Returns:
        At most config.max_questions questions, people-also-ask first.
    """
    config = config or SerpAnalysisConfig()
    merged = list(people_also_ask or []) + list(related_searches or [])

    questions = [
        text
        for text in dedupe_preserving_order(merged)
        if is_question(text, config.question_lead_words)
    ]
    return questions[:config.max_questions]
