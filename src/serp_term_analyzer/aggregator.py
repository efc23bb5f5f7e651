"""
Frequency aggregation across a batch of search results.

Each title and each snippet is tokenized and n-grammed on its own. Every
distinct term of a field counts once towards that field's document count,
while all of its occurrences feed the raw frequency.
"""

from collections import Counter
from typing import Iterable, Optional

from .config import SerpAnalysisConfig
from .models import SearchResultDocument, TermSource, TermStats
from .ngrams import extract_ngrams
from .tokenizer import tokenize


def document_term_stats(counts: Counter, source: TermSource) -> dict[str, TermStats]:
    """
    Turn the term counts of one field of one document into stats records.

    This is the per-document dedup step: a term that occurs k times in one
    title contributes k to raw_frequency but exactly 1 to
    title_document_count.

    Args:
        counts: Term counts from extract_ngrams() for a single text.
        source: Whether the text was a title or a snippet.

    Returns:
        Mapping of term text to its stats for this document field.
    """
    in_title = 1 if source is TermSource.TITLE else 0
    in_snippet = 1 if source is TermSource.SNIPPET else 0

    return {
        term: TermStats(
            text=term,
            raw_frequency=count,
            title_document_count=in_title,
            snippet_document_count=in_snippet,
        )
        for term, count in counts.items()
        if count > 0
    }


def merge_term_stats(table: dict[str, TermStats], additions: dict[str, TermStats]) -> None:
    """Merge per-document stats into the corpus table in place."""
    for term, stats in additions.items():
        existing = table.get(term)
        if existing is None:
            table[term] = TermStats(text=term)
            existing = table[term]
        existing.merge(stats)


def count_field_terms(text: Optional[str], config: SerpAnalysisConfig) -> Counter:
    """Tokenize one field and count its unigrams and bigrams."""
    tokens = tokenize(
        text,
        min_length=config.min_token_length,
        drop_numeric=config.drop_numeric_tokens,
    )
    return extract_ngrams(tokens, config.stopwords)


def aggregate_term_stats(
    documents: Iterable[SearchResultDocument],
    config: Optional[SerpAnalysisConfig] = None,
) -> dict[str, TermStats]:
    """
    Build the corpus-wide term table for a batch of documents.

    Args:
        documents: Search results in rank order.
        config: Analysis configuration. Defaults to SerpAnalysisConfig().

    Returns:
        Mapping of normalized term text to its stats, in first-seen order
        (titles before snippets within a document).
    """
    config = config or SerpAnalysisConfig()
    table: dict[str, TermStats] = {}

    for document in documents:
        title_counts = count_field_terms(document.title, config)
        merge_term_stats(table, document_term_stats(title_counts, TermSource.TITLE))

        snippet_counts = count_field_terms(document.snippet, config)
        merge_term_stats(table, document_term_stats(snippet_counts, TermSource.SNIPPET))

    return table
