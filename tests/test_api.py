"""Tests for the REST API wrapper."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent / "api"))

from index import app  # noqa: E402


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def analyze_body(laufschuhe_documents, people_also_ask, related_searches) -> dict:
    return {
        "keyword": "Laufschuhe",
        "results": [
            {"position": doc.position, "title": doc.title, "snippet": doc.snippet, "url": doc.url}
            for doc in laufschuhe_documents
        ],
        "peopleAlsoAsk": people_also_ask,
        "relatedSearches": related_searches,
    }


class TestHealthAndInfo:
    """Tests for the informational endpoints."""

    def test_health(self, client: TestClient):
        """Test the health check."""
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_info(self, client: TestClient):
        """Test that the info endpoint lists the analysis endpoints."""
        response = client.get("/api/info")

        assert response.status_code == 200
        assert "POST /api/analyze" in response.json()["endpoints"]


class TestAnalyzeEndpoint:
    """Tests for POST /api/analyze."""

    def test_analyze(self, client: TestClient, analyze_body: dict):
        """Test a full analysis request."""
        response = client.post("/api/analyze", json=analyze_body)

        assert response.status_code == 200
        data = response.json()
        assert data["keyword"] == "Laufschuhe"
        assert "test" in data["serpTerms"]["mustHave"]
        assert "kaufen" in data["serpTerms"]["shouldHave"]
        assert data["stats"]["totalResultsAnalyzed"] == 10
        assert len(data["competitorHeadings"]) == 5
        assert data["competitors"][0]["domain"] == "shop1.de"
        assert data["promptContext"].startswith('SERP-ANALYSE für "Laufschuhe":')
        assert data["searchedAt"]

    def test_keyword_trimmed(self, client: TestClient, analyze_body: dict):
        """Test that surrounding whitespace is removed from the keyword."""
        analyze_body["keyword"] = "  Laufschuhe "
        response = client.post("/api/analyze", json=analyze_body)

        assert response.status_code == 200
        assert response.json()["keyword"] == "Laufschuhe"

    def test_empty_results(self, client: TestClient):
        """Test that a request without results returns empty tiers."""
        response = client.post("/api/analyze", json={"keyword": "Laufschuhe"})

        assert response.status_code == 200
        data = response.json()
        assert data["serpTerms"]["all"] == []
        assert data["promptContext"].count("Keine gefunden") == 5

    def test_blank_keyword_rejected(self, client: TestClient):
        """Test that a whitespace keyword fails validation."""
        response = client.post("/api/analyze", json={"keyword": "   "})
        assert response.status_code == 422

    def test_duplicate_positions_rejected(self, client: TestClient):
        """Test that result positions must be unique."""
        body = {
            "keyword": "Laufschuhe",
            "results": [
                {"position": 1, "title": "Laufschuhe Test"},
                {"position": 1, "title": "Laufschuhe kaufen"},
            ],
        }
        response = client.post("/api/analyze", json=body)
        assert response.status_code == 422

    def test_too_many_results_rejected(self, client: TestClient):
        """Test the twenty result limit."""
        body = {
            "keyword": "Laufschuhe",
            "results": [{"position": i, "title": f"Ergebnis {i}"} for i in range(1, 22)],
        }
        response = client.post("/api/analyze", json=body)
        assert response.status_code == 422

    def test_invalid_thresholds(self, client: TestClient, analyze_body: dict):
        """Test that an inverted threshold pair is a bad request."""
        analyze_body["options"] = {"must_have_threshold": 0.3, "should_have_threshold": 0.5}
        response = client.post("/api/analyze", json=analyze_body)

        assert response.status_code == 400
        assert "Invalid options" in response.json()["detail"]

    def test_options_applied(self, client: TestClient, analyze_body: dict):
        """Test caps and extra stopwords from the request options."""
        analyze_body["options"] = {"max_terms": 4, "extra_stopwords": ["test"]}
        data = client.post("/api/analyze", json=analyze_body).json()

        assert len(data["serpTerms"]["all"]) == 4
        assert "test" not in data["serpTerms"]["all"]


class TestSerperEndpoint:
    """Tests for POST /api/analyze/serper."""

    def test_analyze_payload(self, client: TestClient, serper_payload: dict):
        """Test analysis of a raw provider response."""
        response = client.post(
            "/api/analyze/serper",
            json={"keyword": "Laufschuhe", "payload": serper_payload},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["stats"]["totalResultsAnalyzed"] == 3
        assert data["questions"]["relatedSearches"] == ["laufschuhe damen", "was kosten laufschuhe"]
        assert data["competitors"][2]["position"] == 3

    def test_malformed_payload(self, client: TestClient):
        """Test that a malformed organic field is a bad request."""
        response = client.post(
            "/api/analyze/serper",
            json={"keyword": "Laufschuhe", "payload": {"organic": "nope"}},
        )
        assert response.status_code == 400


class TestFileEndpoint:
    """Tests for POST /api/analyze/file."""

    def test_upload_csv(self, client: TestClient, sample_results_csv: Path):
        """Test analysis of an uploaded CSV export."""
        with open(sample_results_csv, "rb") as f:
            response = client.post(
                "/api/analyze/file",
                files={"file": ("serp.csv", f, "text/csv")},
                data={"keyword": "Laufschuhe"},
            )

        assert response.status_code == 200
        assert response.json()["stats"]["totalResultsAnalyzed"] == 3

    def test_upload_unsupported_format(self, client: TestClient):
        """Test that unsupported uploads are rejected."""
        response = client.post(
            "/api/analyze/file",
            files={"file": ("serp.txt", b"Laufschuhe Test", "text/plain")},
            data={"keyword": "Laufschuhe"},
        )

        assert response.status_code == 400
        assert "Unsupported file format" in response.json()["detail"]
