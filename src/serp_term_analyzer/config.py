# -*- coding: utf-8 -*-
"""
Centralized configuration for the SERP term analyzer.

All thresholds, caps and weights used by the scoring and classification
steps live here so the classification policy can be swapped without touching
the algorithms.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable

from .stopwords import GERMAN_STOPWORDS


# Prefixes that mark a search suggestion as a question ("W-Fragen"). Matched
# as string prefixes, so "welche" also covers "welcher" and "wo" covers
# "wozu" and "wofür".
DEFAULT_QUESTION_LEAD_WORDS: tuple[str, ...] = (
    "wie", "was", "warum", "wann", "wo", "wer", "welche",
)


@dataclass(frozen=True)
class SerpAnalysisConfig:
    """
    Configuration for one SERP term analysis.

    Attributes:
        must_have_threshold: Minimum title coverage (share of documents whose
            title contains the term) for the must-have tier.
        should_have_threshold: Minimum title coverage for the should-have
            tier. Everything below lands in nice-to-have; there is no floor.
        max_terms: Length of the ranked `all` list.
        tier_cap: Maximum number of terms per tier.

        max_headings: Number of competitor titles kept as headings.
        max_questions: Maximum number of extracted questions.
        prompt_heading_limit: Headings rendered into the prompt context.
        prompt_question_limit: Questions rendered into the prompt context.
        term_details_limit: Number of terms reported in stats.termDetails.

        min_token_length: Shortest token kept by the tokenizer.
        drop_numeric_tokens: Drop tokens that consist only of digits.
        title_weight: Score added per document whose title has the term.
        snippet_weight: Score added per document whose snippet has the term.

        stopwords: Lowercase stopword set used for unigram and bigram gating.
        question_lead_words: Lowercase prefixes that mark a question.
    """

    # Tier classification
    must_have_threshold: float = 0.5
    should_have_threshold: float = 0.3
    max_terms: int = 30
    tier_cap: int = 10

    # Output sizes
    max_headings: int = 5
    max_questions: int = 10
    prompt_heading_limit: int = 5
    prompt_question_limit: int = 5
    term_details_limit: int = 15

    # Tokenization and scoring
    min_token_length: int = 3
    drop_numeric_tokens: bool = False
    title_weight: int = 3
    snippet_weight: int = 1

    # Language data
    stopwords: frozenset[str] = field(default=GERMAN_STOPWORDS)
    question_lead_words: tuple[str, ...] = DEFAULT_QUESTION_LEAD_WORDS

    def __post_init__(self):
        """Validate configuration values."""
        if not 0.0 <= self.should_have_threshold < self.must_have_threshold <= 1.0:
            raise ValueError(
                "thresholds must satisfy 0 <= should_have_threshold < "
                f"must_have_threshold <= 1, got should_have_threshold="
                f"{self.should_have_threshold}, must_have_threshold="
                f"{self.must_have_threshold}"
            )
        for name in (
            "max_terms",
            "tier_cap",
            "max_headings",
            "max_questions",
            "prompt_heading_limit",
            "prompt_question_limit",
            "term_details_limit",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length must be >= 1, got {self.min_token_length}")
        if self.title_weight < 0 or self.snippet_weight < 0:
            raise ValueError(
                f"weights must be >= 0, got title_weight={self.title_weight}, "
                f"snippet_weight={self.snippet_weight}"
            )

        # Normalize language data so lookups can assume lowercase sets
        object.__setattr__(
            self, "stopwords", frozenset(word.lower() for word in self.stopwords)
        )
        object.__setattr__(
            self,
            "question_lead_words",
            tuple(word.lower() for word in self.question_lead_words),
        )

    def with_extra_stopwords(self, words: Iterable[str]) -> "SerpAnalysisConfig":
        """Return a copy whose stopword set also contains the given words."""
        extra = {word.strip().lower() for word in words if word and word.strip()}
        if not extra:
            return self
        return replace(self, stopwords=self.stopwords | extra)

    @classmethod
    def from_overrides(cls, **overrides) -> "SerpAnalysisConfig":
        """Create a config from keyword overrides, ignoring None values.

        Lets CLI options and API request fields pass through unchanged when
        the caller did not set them.

        Args:
            **overrides: Field values to override.

        Returns:
            SerpAnalysisConfig with the non-None overrides applied.
        """
        return cls(**{key: value for key, value in overrides.items() if value is not None})
