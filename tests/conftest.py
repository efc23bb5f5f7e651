"""
Pytest fixtures and configuration for SERP Term Analyzer tests.
"""

import json
from pathlib import Path

import pytest

from serp_term_analyzer.models import SearchResultDocument


LAUFSCHUHE_TITLES = [
    "Laufschuhe Test: Modelle im Vergleich",
    "Laufschuhe Test der Stiftung Warentest",
    "Großer Laufschuhe Test",
    "Test: Laufschuhe für Damen",
    "Laufschuhe Herren Test",
    "Trail Laufschuhe im Test",
    "Laufschuhe online kaufen",
    "Laufschuhe günstig kaufen",
    "Laufschuhe kaufen bei Sportcheck",
    "Damen Laufschuhe kaufen",
]

LAUFSCHUHE_SNIPPETS = [
    "Wir haben aktuelle Modelle auf Dämpfung und Passform geprüft.",
    "Die Stiftung Warentest hat Laufschuhe für Einsteiger bewertet.",
    "Welcher Schuh passt zu Ihrem Laufstil? Dämpfung, Gewicht und Sprengung im Überblick.",
    "Leichte Modelle mit guter Dämpfung für lange Läufe.",
    "",
    "Griffige Sohle und stabile Passform für Trail-Running.",
    "Große Auswahl, kostenloser Versand und Rückgabe.",
    "Reduzierte Modelle bekannter Marken mit kostenlosem Versand.",
    "Jetzt bequem online bestellen.",
    "Damenmodelle mit optimaler Dämpfung und Passform.",
]


@pytest.fixture
def laufschuhe_documents() -> list[SearchResultDocument]:
    """Ten results for "Laufschuhe": six titles mention "test", four "kaufen"."""
    return [
        SearchResultDocument(
            position=index,
            title=title,
            snippet=snippet,
            url=f"https://www.shop{index}.de/laufschuhe",
        )
        for index, (title, snippet) in enumerate(
            zip(LAUFSCHUHE_TITLES, LAUFSCHUHE_SNIPPETS), start=1
        )
    ]


@pytest.fixture
def people_also_ask() -> list[str]:
    return [
        "Welche Laufschuhe sind die besten?",
        "Wie oft sollte man Laufschuhe wechseln?",
        "Was kosten gute Laufschuhe?",
    ]


@pytest.fixture
def related_searches() -> list[str]:
    return [
        "laufschuhe damen",
        "wie oft sollte man laufschuhe wechseln?",
        "warum laufschuhe mit sprengung",
        "laufschuhe herren sale",
    ]


@pytest.fixture
def serper_payload() -> dict:
    """Search provider response in Serper.dev format."""
    return {
        "searchParameters": {"q": "laufschuhe", "gl": "de", "hl": "de"},
        "organic": [
            {
                "title": "Laufschuhe Test: Modelle im Vergleich",
                "link": "https://www.example.de/test",
                "snippet": "Aktuelle Modelle im Vergleich.",
                "position": 1,
            },
            {
                "title": "Laufschuhe online kaufen",
                "link": "https://shop.example.com/laufschuhe",
                "snippet": None,
                "position": 2,
            },
            {
                "title": "Laufschuhe günstig kaufen",
                "link": "https://outlet.example.org",
            },
        ],
        "peopleAlsoAsk": [
            {"question": "Welche Laufschuhe sind die besten?", "snippet": "..."},
            {"question": "Wie oft Laufschuhe wechseln?"},
        ],
        "relatedSearches": [
            {"query": "laufschuhe damen"},
            {"query": "was kosten laufschuhe"},
        ],
    }


@pytest.fixture
def sample_results_csv(tmp_path: Path) -> Path:
    """Create a sample results CSV file."""
    csv_path = tmp_path / "serp.csv"
    csv_content = """Rank,Title,Snippet,URL
1,Laufschuhe Test: Modelle im Vergleich,Aktuelle Modelle im Vergleich.,https://www.example.de/test
2,Laufschuhe online kaufen,,https://shop.example.com/laufschuhe
3,Laufschuhe günstig kaufen,Reduzierte Modelle mit Versand.,https://outlet.example.org
"""
    csv_path.write_text(csv_content, encoding="utf-8")
    return csv_path


@pytest.fixture
def sample_results_excel(tmp_path: Path) -> Path:
    """Create a sample results Excel file."""
    import pandas as pd

    xlsx_path = tmp_path / "serp.xlsx"
    data = {
        "position": [1, 2],
        "title": ["Laufschuhe Test", "Laufschuhe kaufen"],
        "description": ["Modelle im Vergleich.", "Große Auswahl online."],
        "link": ["https://www.example.de/test", "https://shop.example.com"],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path


@pytest.fixture
def sample_results_json(tmp_path: Path, serper_payload: dict) -> Path:
    """Create a JSON file holding a provider payload."""
    json_path = tmp_path / "serp.json"
    json_path.write_text(json.dumps(serper_payload, ensure_ascii=False), encoding="utf-8")
    return json_path
