"""
Search result loading from provider payloads and files.

This module maps search-provider output into the analyzer's input types:
- Serper.dev style JSON payloads (organic, peopleAlsoAsk, relatedSearches)
- JSON files holding such a payload or a plain list of results
- CSV files
- Excel files (.xlsx, .xls)
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import pandas as pd

from .models import SearchResultDocument

logger = logging.getLogger(__name__)


class SerpLoadError(Exception):
    """Raised when search results cannot be loaded."""
    pass


# Common column name variations for exported SERP data
POSITION_COLUMN_VARIANTS = ["position", "rank", "pos", "ranking", "serp_position"]
TITLE_COLUMN_VARIANTS = ["title", "headline", "page_title", "serp_title"]
SNIPPET_COLUMN_VARIANTS = ["snippet", "description", "meta_description", "summary", "text"]
URL_COLUMN_VARIANTS = ["url", "link", "page_url", "result_url", "address"]


@dataclass
class SerpPayload:
    """Search results plus the question boxes of one results page."""
    documents: list[SearchResultDocument] = field(default_factory=list)
    people_also_ask: list[str] = field(default_factory=list)
    related_searches: list[str] = field(default_factory=list)


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def _question_texts(items: Any, key: str) -> list[str]:
    """Pull question strings out of a provider list of strings or objects."""
    texts: list[str] = []
    for item in items or []:
        if isinstance(item, Mapping):
            value = item.get(key)
        else:
            value = item
        if value is not None and str(value).strip():
            texts.append(str(value).strip())
    return texts


def parse_serper_payload(payload: Mapping[str, Any]) -> SerpPayload:
    """
    Map a Serper.dev style search response into analyzer input.

    Organic entries without a position get their 1-based index. People also
    ask entries may be objects with a `question` key or plain strings;
    related searches may be objects with a `query` key or plain strings.

    Args:
        payload: Decoded JSON response.

    Returns:
        SerpPayload with documents and question lists.

    Raises:
        SerpLoadError: If the payload is not a JSON object or `organic` is
            not a list.
    """
    if not isinstance(payload, Mapping):
        raise SerpLoadError(f"Expected a JSON object, got {type(payload).__name__}")

    organic = payload.get("organic") or []
    if not isinstance(organic, list):
        raise SerpLoadError("Field 'organic' must be a list of results")

    documents = [
        SearchResultDocument.from_dict(item, default_position=index)
        for index, item in enumerate(organic, start=1)
        if isinstance(item, Mapping)
    ]

    return SerpPayload(
        documents=documents,
        people_also_ask=_question_texts(payload.get("peopleAlsoAsk"), "question"),
        related_searches=_question_texts(payload.get("relatedSearches"), "query"),
    )


def load_serp_from_json(file_path: Union[str, Path]) -> SerpPayload:
    """
    Load search results from a JSON file.

    The file may hold a provider payload (object with `organic`) or a plain
    list of result objects.

    Raises:
        SerpLoadError: If the file cannot be read or has the wrong shape.
    """
    path = Path(file_path)

    if not path.exists():
        raise SerpLoadError(f"File not found: {file_path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SerpLoadError(f"Failed to read JSON file: {e}")

    if isinstance(data, list):
        data = {"organic": data}

    return parse_serper_payload(data)


def load_serp_from_csv(file_path: Union[str, Path]) -> SerpPayload:
    """
    Load search results from a CSV file.

    Args:
        file_path: Path to the CSV file.

    Returns:
        SerpPayload with documents only.

    Raises:
        SerpLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise SerpLoadError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(path, encoding="utf-8")
    except UnicodeDecodeError:
        # Try alternative encoding
        try:
            df = pd.read_csv(path, encoding="latin-1")
        except Exception as e:
            raise SerpLoadError(f"Failed to read CSV file: {e}")
    except Exception as e:
        raise SerpLoadError(f"Failed to read CSV file: {e}")

    return SerpPayload(documents=_parse_results_dataframe(df))


def load_serp_from_excel(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> SerpPayload:
    """
    Load search results from an Excel file.

    Args:
        file_path: Path to the Excel file (.xlsx or .xls).
        sheet_name: Optional sheet name to read from. Defaults to first sheet.

    Returns:
        SerpPayload with documents only.

    Raises:
        SerpLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise SerpLoadError(f"File not found: {file_path}")

    try:
        if sheet_name:
            df = pd.read_excel(path, sheet_name=sheet_name)
        else:
            df = pd.read_excel(path)
    except Exception as e:
        raise SerpLoadError(f"Failed to read Excel file: {e}")

    return SerpPayload(documents=_parse_results_dataframe(df))


def _cell_text(row: pd.Series, column: Optional[str]) -> str:
    """Read a cell as text, treating missing columns and NaN as empty."""
    if column is None or pd.isna(row[column]):
        return ""
    return str(row[column]).strip()


def _parse_results_dataframe(df: pd.DataFrame) -> list[SearchResultDocument]:
    """
    Parse a DataFrame into search result documents.

    A title or snippet column is required; position and url are optional.
    Rows without a usable position get their 1-based row index.

    Raises:
        SerpLoadError: If the file is empty or has neither title nor snippet.
    """
    if df.empty:
        raise SerpLoadError("Results file is empty")

    title_col = _find_column(df, TITLE_COLUMN_VARIANTS)
    snippet_col = _find_column(df, SNIPPET_COLUMN_VARIANTS)
    if title_col is None and snippet_col is None:
        raise SerpLoadError(
            f"No title or snippet column found. Expected one of: "
            f"{', '.join(TITLE_COLUMN_VARIANTS + SNIPPET_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(str(col) for col in df.columns)}"
        )

    position_col = _find_column(df, POSITION_COLUMN_VARIANTS)
    url_col = _find_column(df, URL_COLUMN_VARIANTS)

    documents: list[SearchResultDocument] = []

    for index, (_, row) in enumerate(df.iterrows(), start=1):
        position = index
        if position_col and not pd.isna(row[position_col]):
            try:
                position = int(float(row[position_col]))
            except (ValueError, TypeError):
                logger.warning(f"Row {index}: invalid position '{row[position_col]}', using {index}")

        documents.append(
            SearchResultDocument(
                position=position,
                title=_cell_text(row, title_col),
                snippet=_cell_text(row, snippet_col),
                url=_cell_text(row, url_col),
            )
        )

    return documents


def load_serp_results(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> SerpPayload:
    """
    Load search results from a JSON, CSV or Excel file.

    Automatically detects file type based on extension.

    Args:
        file_path: Path to the results file.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        SerpPayload ready for analyze_serp().

    Raises:
        SerpLoadError: If the file cannot be read or is invalid.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return load_serp_from_json(path)
    elif suffix == ".csv":
        return load_serp_from_csv(path)
    elif suffix in (".xlsx", ".xls"):
        return load_serp_from_excel(path, sheet_name)
    else:
        raise SerpLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .json, .csv, .xlsx, .xls"
        )
