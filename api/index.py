"""
FastAPI wrapper for the SERP Term Analyzer - Vercel Serverless Function.

This module exposes the SERP term analysis as a REST API. Fetching results
from the search provider stays with the caller; these endpoints accept the
results as JSON, as a raw provider payload, or as an uploaded file.
"""

import logging
import os
import tempfile
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, UploadFile, File, Form
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from serp_term_analyzer import __version__
from serp_term_analyzer.analyzer import analyze_serp
from serp_term_analyzer.config import SerpAnalysisConfig
from serp_term_analyzer.models import SearchResultDocument
from serp_term_analyzer.serp_loader import (
    SerpLoadError,
    SerpPayload,
    load_serp_results,
    parse_serper_payload,
)

logger = logging.getLogger(__name__)

MAX_RESULTS = 20

app = FastAPI(
    title="SERP Term Analyzer API",
    description="Extracts, ranks and tiers the vocabulary of top-ranking search results for a keyword",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SearchResultInput(BaseModel):
    """Single organic search result."""
    position: int = Field(..., ge=1, description="1-based rank, unique within a request")
    title: Optional[str] = ""
    snippet: Optional[str] = ""
    url: Optional[str] = ""


class AnalysisOptions(BaseModel):
    """Optional overrides of the classification policy."""
    must_have_threshold: Optional[float] = Field(None, ge=0, le=1)
    should_have_threshold: Optional[float] = Field(None, ge=0, le=1)
    max_terms: Optional[int] = Field(None, ge=0)
    tier_cap: Optional[int] = Field(None, ge=0)
    extra_stopwords: list[str] = Field(default_factory=list, description="Additional words to ignore")


class AnalyzeRequest(BaseModel):
    """Request model for analyzing a list of search results."""
    keyword: str = Field(..., min_length=1, max_length=200, description="Focus keyword")
    country: str = Field("de", description="Country the results were fetched for (informational)")
    language: str = Field("de", description="Language the results were fetched for (informational)")
    results: list[SearchResultInput] = Field(default_factory=list, max_length=MAX_RESULTS)
    people_also_ask: list[str] = Field(default_factory=list, alias="peopleAlsoAsk")
    related_searches: list[str] = Field(default_factory=list, alias="relatedSearches")
    options: Optional[AnalysisOptions] = None

    model_config = {"populate_by_name": True}

    @field_validator("keyword")
    @classmethod
    def keyword_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Keyword is required")
        return value.strip()

    @field_validator("results")
    @classmethod
    def positions_unique(cls, value: list[SearchResultInput]) -> list[SearchResultInput]:
        positions = [item.position for item in value]
        if len(positions) != len(set(positions)):
            raise ValueError("Result positions must be unique")
        return value


class SerperAnalyzeRequest(BaseModel):
    """Request model for analyzing a raw search provider response."""
    keyword: str = Field(..., min_length=1, max_length=200, description="Focus keyword")
    payload: dict[str, Any] = Field(..., description="Provider response with organic, peopleAlsoAsk and relatedSearches")
    options: Optional[AnalysisOptions] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def build_config(options: Optional[AnalysisOptions]) -> SerpAnalysisConfig:
    """
    Build the analysis config from request options.

    Raises:
        HTTPException: 400 if the options form an invalid policy.
    """
    if options is None:
        return SerpAnalysisConfig()

    try:
        config = SerpAnalysisConfig.from_overrides(
            must_have_threshold=options.must_have_threshold,
            should_have_threshold=options.should_have_threshold,
            max_terms=options.max_terms,
            tier_cap=options.tier_cap,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid options: {e}")

    return config.with_extra_stopwords(options.extra_stopwords)


def _searched_at() -> str:
    return datetime.now(timezone.utc).isoformat()


def _run_analysis(keyword: str, payload: SerpPayload, config: SerpAnalysisConfig) -> dict:
    """Run the analysis and serialize it to the response contract."""
    if len(payload.documents) > MAX_RESULTS:
        raise HTTPException(
            status_code=400,
            detail=f"Too many results: {len(payload.documents)}, maximum is {MAX_RESULTS}",
        )

    result = analyze_serp(
        keyword,
        payload.documents,
        people_also_ask=payload.people_also_ask,
        related_searches=payload.related_searches,
        config=config,
        searched_at=_searched_at(),
    )
    return result.to_dict()


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@app.post("/api/analyze")
async def analyze_results(request: AnalyzeRequest):
    """
    Analyze a list of search results.

    Returns serpTerms, questions, competitors, competitorHeadings, stats and
    promptContext for the given keyword.
    """
    config = build_config(request.options)
    payload = SerpPayload(
        documents=[
            SearchResultDocument(
                position=item.position,
                title=item.title or "",
                snippet=item.snippet or "",
                url=item.url or "",
            )
            for item in request.results
        ],
        people_also_ask=request.people_also_ask,
        related_searches=request.related_searches,
    )

    logger.info(f"Analyzing SERP for keyword '{request.keyword}' in {request.country}/{request.language}")
    return _run_analysis(request.keyword, payload, config)


@app.post("/api/analyze/serper")
async def analyze_serper_payload(request: SerperAnalyzeRequest):
    """Analyze a raw search provider response (organic, peopleAlsoAsk, relatedSearches)."""
    config = build_config(request.options)

    try:
        payload = parse_serper_payload(request.payload)
    except SerpLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _run_analysis(request.keyword.strip(), payload, config)


@app.post("/api/analyze/file")
async def analyze_results_file(
    file: UploadFile = File(..., description="Search results file (JSON, CSV or Excel)"),
    keyword: str = Form(..., min_length=1, max_length=200),
    max_terms: Optional[int] = Form(None, ge=0),
    tier_cap: Optional[int] = Form(None, ge=0),
):
    """
    Analyze search results from an uploaded file.

    Upload a JSON provider payload or a CSV/Excel export with title and
    snippet columns.
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    if not keyword.strip():
        raise HTTPException(status_code=400, detail="Keyword is required")

    config = build_config(AnalysisOptions(max_terms=max_terms, tier_cap=tier_cap))

    suffix = Path(file.filename).suffix.lower()
    tmp_path: Optional[Path] = None
    try:
        # Save uploaded file temporarily
        with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as tmp:
            tmp.write(await file.read())
            tmp_path = Path(tmp.name)

        payload = load_serp_results(tmp_path)
    except SerpLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        if tmp_path is not None and tmp_path.exists():
            os.unlink(tmp_path)

    return _run_analysis(keyword.strip(), payload, config)


@app.get("/api/info")
async def api_info():
    """Get API information and usage instructions."""
    return {
        "name": "SERP Term Analyzer API",
        "version": __version__,
        "description": "Competitive SERP term extraction and tiering",
        "endpoints": {
            "GET /api/health": "Health check",
            "POST /api/analyze": "Analyze a JSON list of search results",
            "POST /api/analyze/serper": "Analyze a raw search provider response",
            "POST /api/analyze/file": "Analyze an uploaded JSON, CSV or Excel results file",
            "GET /api/info": "This endpoint",
        },
        "documentation": "/docs",
        "openapi": "/openapi.json",
    }
