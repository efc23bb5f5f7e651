"""
SERP term analysis pipeline.

Runs tokenization, n-gram extraction, aggregation, scoring and tier
classification over one batch of search results and assembles the result
handed to the content generator. The analysis is a pure function of its
inputs: no I/O, no shared state, no exceptions on degenerate input.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union
from urllib.parse import urlparse

from .aggregator import aggregate_term_stats
from .config import SerpAnalysisConfig
from .models import (
    CompetitorSummary,
    SearchResultDocument,
    SerpAnalysisResult,
    SerpQuestions,
    SerpStats,
    TermDetail,
)
from .prompt_context import format_prompt_context
from .questions import collect_headings, dedupe_preserving_order, extract_questions
from .scoring import rank_terms
from .tiers import classify_terms

logger = logging.getLogger(__name__)


DocumentInput = Union[SearchResultDocument, Mapping[str, Any]]


def coerce_documents(documents: Optional[Iterable[DocumentInput]]) -> list[SearchResultDocument]:
    """
    Normalize caller input into SearchResultDocument objects.

    Plain mappings are converted with SearchResultDocument.from_dict(); a
    record without a position gets its 1-based index. None entries are
    skipped.
    """
    coerced: list[SearchResultDocument] = []
    for index, document in enumerate(documents or [], start=1):
        if document is None:
            continue
        if isinstance(document, SearchResultDocument):
            coerced.append(document)
        else:
            coerced.append(SearchResultDocument.from_dict(document, default_position=index))
    return coerced


def extract_domain(url: str) -> str:
    """Get the bare host of a URL, without a leading "www."."""
    if not url:
        return ""
    try:
        netloc = urlparse(url).netloc or urlparse(f"//{url}").netloc
    except ValueError:
        return ""
    netloc = netloc.lower().split("@")[-1].split(":")[0]
    if netloc.startswith("www."):
        netloc = netloc[4:]
    return netloc


def summarize_competitors(documents: Iterable[SearchResultDocument]) -> list[CompetitorSummary]:
    """Build a competitor summary per document, in rank order."""
    return [
        CompetitorSummary(
            position=document.position,
            title=document.title,
            url=document.url,
            snippet=document.snippet,
            domain=extract_domain(document.url),
        )
        for document in documents
    ]


def average_snippet_length(documents: list[SearchResultDocument]) -> int:
    """Mean snippet length in characters, rounded (0 for an empty batch)."""
    if not documents:
        return 0
    total = sum(len(document.snippet or "") for document in documents)
    return round(total / len(documents))


def analyze_serp(
    keyword: str,
    documents: Optional[Iterable[DocumentInput]],
    people_also_ask: Optional[Iterable[str]] = None,
    related_searches: Optional[Iterable[str]] = None,
    config: Optional[SerpAnalysisConfig] = None,
    searched_at: Optional[str] = None,
) -> SerpAnalysisResult:
    """
    Extract, rank and tier the vocabulary of the top search results.

    Args:
        keyword: Focus keyword. Terms overlapping it are excluded. An empty
            keyword excludes nothing.
        documents: Search results in rank order, as SearchResultDocument
            objects or provider dicts (title, snippet, url/link, position).
        people_also_ask: "People also ask" questions, if the provider had any.
        related_searches: "Related searches" queries, if any.
        config: Analysis configuration. Defaults to SerpAnalysisConfig().
        searched_at: Optional timestamp owned by the caller; passed through
            unchanged so the analysis itself stays deterministic.

    Returns:
        SerpAnalysisResult with tiered terms, questions, competitor data,
        statistics and the formatted prompt context.
    """
    config = config or SerpAnalysisConfig()
    keyword = keyword or ""
    batch = coerce_documents(documents)
    total_documents = len(batch)

    logger.debug(f"Analyzing {total_documents} search results for keyword '{keyword}'")

    table = aggregate_term_stats(batch, config)
    ranked = rank_terms(table, keyword, config)
    serp_terms = classify_terms(ranked, total_documents, config)

    questions = SerpQuestions(
        people_also_ask=dedupe_preserving_order(people_also_ask),
        related_searches=dedupe_preserving_order(related_searches),
    )
    questions.extracted = extract_questions(
        questions.people_also_ask,
        questions.related_searches,
        config,
    )

    headings = collect_headings(batch, config.max_headings)

    stats = SerpStats(
        total_results_analyzed=total_documents,
        average_snippet_length=average_snippet_length(batch),
        term_details=[TermDetail.from_scored(term) for term in ranked[:config.term_details_limit]],
    )

    prompt_context = format_prompt_context(
        keyword,
        serp_terms,
        headings,
        questions.extracted,
        config,
    )

    logger.info(
        f"SERP analysis complete for '{keyword}': {total_documents} results, "
        f"{len(table)} candidate terms, mustHave={len(serp_terms.must_have)}, "
        f"shouldHave={len(serp_terms.should_have)}, "
        f"niceToHave={len(serp_terms.nice_to_have)}, "
        f"questions={len(questions.extracted)}"
    )

    return SerpAnalysisResult(
        keyword=keyword,
        serp_terms=serp_terms,
        questions=questions,
        competitor_headings=headings,
        competitors=summarize_competitors(batch),
        stats=stats,
        prompt_context=prompt_context,
        ranked_terms=ranked,
        searched_at=searched_at,
    )
