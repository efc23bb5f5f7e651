"""
Data models for the SERP term analyzer.

This module defines the input document type, the per-term aggregate record
and the result structures returned to callers.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class TermTier(Enum):
    """Priority bucket of a term, derived from its title coverage."""
    MUST_HAVE = "mustHave"
    SHOULD_HAVE = "shouldHave"
    NICE_TO_HAVE = "niceToHave"


class TermSource(Enum):
    """Field of a search result a term was found in."""
    TITLE = "title"
    SNIPPET = "snippet"


def _as_text(value: Any) -> str:
    """Coerce an optional field value to a string ("" for missing)."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class SearchResultDocument:
    """One competitor entry of a search results page."""
    position: int
    title: str = ""
    snippet: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_position: int = 0) -> "SearchResultDocument":
        """
        Build a document from a provider record.

        Missing or null title, snippet and url become empty strings. The
        provider's `link` field is accepted as an alias for `url`.

        Args:
            data: Record with position, title, snippet and url/link keys.
            default_position: Position used when the record has none.

        Returns:
            SearchResultDocument instance.
        """
        position = data.get("position")
        try:
            position = int(position) if position is not None else default_position
        except (TypeError, ValueError):
            position = default_position

        url = data.get("url")
        if url is None:
            url = data.get("link")

        return cls(
            position=position,
            title=_as_text(data.get("title")),
            snippet=_as_text(data.get("snippet")),
            url=_as_text(url),
        )


@dataclass
class TermStats:
    """Corpus-wide counts for one unigram or bigram."""
    text: str
    raw_frequency: int = 0
    title_document_count: int = 0
    snippet_document_count: int = 0

    def merge(self, other: "TermStats") -> None:
        """Add another record's counts for the same term into this one."""
        if other.text != self.text:
            raise ValueError(f"Cannot merge stats of '{other.text}' into '{self.text}'")
        self.raw_frequency += other.raw_frequency
        self.title_document_count += other.title_document_count
        self.snippet_document_count += other.snippet_document_count


@dataclass(frozen=True)
class ScoredTerm:
    """A term together with its relevance score."""
    text: str
    score: int
    raw_frequency: int
    title_document_count: int
    snippet_document_count: int

    @classmethod
    def from_stats(cls, stats: TermStats, score: int) -> "ScoredTerm":
        return cls(
            text=stats.text,
            score=score,
            raw_frequency=stats.raw_frequency,
            title_document_count=stats.title_document_count,
            snippet_document_count=stats.snippet_document_count,
        )


@dataclass(frozen=True)
class TermDetail:
    """Per-term numbers exposed for debugging by the caller."""
    term: str
    score: int
    in_titles: int
    in_snippets: int
    frequency: int

    @classmethod
    def from_scored(cls, scored: ScoredTerm) -> "TermDetail":
        return cls(
            term=scored.text,
            score=scored.score,
            in_titles=scored.title_document_count,
            in_snippets=scored.snippet_document_count,
            frequency=scored.raw_frequency,
        )

    def to_dict(self) -> dict:
        return {
            "term": self.term,
            "score": self.score,
            "inTitles": self.in_titles,
            "inSnippets": self.in_snippets,
            "frequency": self.frequency,
        }


@dataclass
class SerpTerms:
    """Ranked terms and their tiers."""
    must_have: list[str] = field(default_factory=list)
    should_have: list[str] = field(default_factory=list)
    nice_to_have: list[str] = field(default_factory=list)
    all: list[str] = field(default_factory=list)

    def tier_of(self, term: str) -> Optional[TermTier]:
        """Get the tier a term was assigned to, if any."""
        if term in self.must_have:
            return TermTier.MUST_HAVE
        if term in self.should_have:
            return TermTier.SHOULD_HAVE
        if term in self.nice_to_have:
            return TermTier.NICE_TO_HAVE
        return None

    def to_dict(self) -> dict:
        return {
            "mustHave": list(self.must_have),
            "shouldHave": list(self.should_have),
            "niceToHave": list(self.nice_to_have),
            "all": list(self.all),
        }


@dataclass
class SerpQuestions:
    """Question-like suggestions returned alongside the organic results."""
    people_also_ask: list[str] = field(default_factory=list)
    related_searches: list[str] = field(default_factory=list)
    extracted: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "peopleAlsoAsk": list(self.people_also_ask),
            "relatedSearches": list(self.related_searches),
            "extracted": list(self.extracted),
        }


@dataclass(frozen=True)
class CompetitorSummary:
    """Condensed view of one competitor result."""
    position: int
    title: str
    url: str
    snippet: str
    domain: str

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
            "domain": self.domain,
        }


@dataclass
class SerpStats:
    """Batch statistics."""
    total_results_analyzed: int = 0
    average_snippet_length: int = 0
    term_details: list[TermDetail] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalResultsAnalyzed": self.total_results_analyzed,
            "averageSnippetLength": self.average_snippet_length,
            "termDetails": [detail.to_dict() for detail in self.term_details],
        }


@dataclass
class SerpAnalysisResult:
    """Complete output of one SERP term analysis."""
    keyword: str
    serp_terms: SerpTerms = field(default_factory=SerpTerms)
    questions: SerpQuestions = field(default_factory=SerpQuestions)
    competitor_headings: list[str] = field(default_factory=list)
    competitors: list[CompetitorSummary] = field(default_factory=list)
    stats: SerpStats = field(default_factory=SerpStats)
    prompt_context: str = ""
    ranked_terms: list[ScoredTerm] = field(default_factory=list)
    searched_at: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize to the camelCase output contract."""
        data = {
            "keyword": self.keyword,
            "serpTerms": self.serp_terms.to_dict(),
            "questions": self.questions.to_dict(),
            "competitors": [competitor.to_dict() for competitor in self.competitors],
            "competitorHeadings": list(self.competitor_headings),
            "stats": self.stats.to_dict(),
            "promptContext": self.prompt_context,
        }
        if self.searched_at is not None:
            data["searchedAt"] = self.searched_at
        return data

    def to_json(self, indent: int = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
