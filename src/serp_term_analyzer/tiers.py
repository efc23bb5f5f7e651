"""
Tier classification of ranked terms by title coverage.

Coverage is the share of documents in the batch whose title contains the
term. Terms are walked in score order and filtered into tiers; the tiers are
never re-sorted.
"""

from typing import Optional, Sequence

from .config import SerpAnalysisConfig
from .models import ScoredTerm, SerpTerms, TermTier


def title_coverage(title_document_count: int, total_documents: int) -> float:
    """Share of documents whose title contains a term (0.0 for an empty batch)."""
    if total_documents <= 0:
        return 0.0
    return title_document_count / total_documents


def classify_tier(
    title_document_count: int,
    total_documents: int,
    config: Optional[SerpAnalysisConfig] = None,
) -> TermTier:
    """
    Assign a tier from title coverage.

    Must-have at or above must_have_threshold, should-have at or above
    should_have_threshold, nice-to-have otherwise.
    """
    config = config or SerpAnalysisConfig()
    coverage = title_coverage(title_document_count, total_documents)

    if coverage >= config.must_have_threshold:
        return TermTier.MUST_HAVE
    if coverage >= config.should_have_threshold:
        return TermTier.SHOULD_HAVE
    return TermTier.NICE_TO_HAVE


def classify_terms(
    ranked: Sequence[ScoredTerm],
    total_documents: int,
    config: Optional[SerpAnalysisConfig] = None,
) -> SerpTerms:
    """
    Split the ranked term list into capped tiers.

    Args:
        ranked: Output of rank_terms(), highest score first.
        total_documents: Number of documents in the batch.
        config: Analysis configuration.

    Returns:
        SerpTerms whose `all` is the ranked list and whose tiers each hold
        the first tier_cap qualifying terms in score order.
    """
    config = config or SerpAnalysisConfig()
    buckets: dict[TermTier, list[str]] = {tier: [] for tier in TermTier}

    for term in ranked:
        tier = classify_tier(term.title_document_count, total_documents, config)
        bucket = buckets[tier]
        if len(bucket) < config.tier_cap:
            bucket.append(term.text)

    return SerpTerms(
        must_have=buckets[TermTier.MUST_HAVE],
        should_have=buckets[TermTier.SHOULD_HAVE],
        nice_to_have=buckets[TermTier.NICE_TO_HAVE],
        all=[term.text for term in ranked],
    )
