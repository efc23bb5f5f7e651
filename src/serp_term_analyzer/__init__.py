"""
SERP Term Analyzer

Extracts the vocabulary that top-ranking competitors use for a keyword:
- Tokenizes titles and snippets of the search results
- Counts unigrams and bigrams with stopword gating
- Scores terms with a title-weighted relevance formula
- Sorts the top terms into must-have, should-have and nice-to-have tiers
- Formats a prompt context block for content generation
"""

__version__ = "1.0.0"
__author__ = "SERP Term Analyzer Team"

from .config import SerpAnalysisConfig, DEFAULT_QUESTION_LEAD_WORDS

from .models import (
    SearchResultDocument,
    TermStats,
    ScoredTerm,
    TermDetail,
    TermTier,
    TermSource,
    SerpTerms,
    SerpQuestions,
    CompetitorSummary,
    SerpStats,
    SerpAnalysisResult,
)

from .stopwords import GERMAN_STOPWORDS, is_stopword
from .tokenizer import tokenize
from .ngrams import extract_ngrams

from .aggregator import (
    aggregate_term_stats,
    document_term_stats,
    merge_term_stats,
)

from .scoring import (
    normalize_keyword,
    overlaps_focus_keyword,
    rank_terms,
    score_term,
)

from .tiers import classify_terms, classify_tier, title_coverage

from .questions import (
    collect_headings,
    dedupe_preserving_order,
    extract_questions,
    is_question,
)

from .prompt_context import EMPTY_PLACEHOLDER, format_prompt_context

from .analyzer import analyze_serp

# Input loading
from .serp_loader import (
    SerpLoadError,
    SerpPayload,
    load_serp_results,
    parse_serper_payload,
)

__all__ = [
    # Configuration
    "SerpAnalysisConfig",
    "DEFAULT_QUESTION_LEAD_WORDS",
    # Models
    "SearchResultDocument",
    "TermStats",
    "ScoredTerm",
    "TermDetail",
    "TermTier",
    "TermSource",
    "SerpTerms",
    "SerpQuestions",
    "CompetitorSummary",
    "SerpStats",
    "SerpAnalysisResult",
    # Tokenization
    "GERMAN_STOPWORDS",
    "is_stopword",
    "tokenize",
    "extract_ngrams",
    # Aggregation and scoring
    "aggregate_term_stats",
    "document_term_stats",
    "merge_term_stats",
    "normalize_keyword",
    "overlaps_focus_keyword",
    "rank_terms",
    "score_term",
    # Classification
    "classify_terms",
    "classify_tier",
    "title_coverage",
    # Questions and prompt context
    "collect_headings",
    "dedupe_preserving_order",
    "extract_questions",
    "is_question",
    "EMPTY_PLACEHOLDER",
    "format_prompt_context",
    # Pipeline
    "analyze_serp",
    # Input loading
    "SerpLoadError",
    "SerpPayload",
    "load_serp_results",
    "parse_serper_payload",
]
