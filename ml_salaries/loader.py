from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable

import requests

from .config import DashboardConfig
from .ingest import CsvParseError, parse_csv_bytes
from .models import LoadResult

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_csv_bytes(source: str, timeout: float = 30.0) -> bytes:
    if is_url(source):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        return response.content
    return Path(source).read_bytes()


async def load_salary_data(
    source: str | Path,
    *,
    timeout: float = 30.0,
    encoding_candidates: Iterable[str] = ("utf-8-sig", "utf-8", "latin-1"),
) -> LoadResult:
    """Fetch and parse the salary CSV; failures are logged and yield an empty result."""
    source_text = str(source)
    logger.info("Loading salary CSV from %s", source_text)

    try:
        raw = await asyncio.to_thread(fetch_csv_bytes, source_text, timeout)
    except (requests.RequestException, OSError) as exc:
        logger.error("Error fetching the CSV file %s: %s", source_text, exc)
        return LoadResult(source=source_text, error=f"fetch failed: {exc}")

    try:
        parsed = await asyncio.to_thread(parse_csv_bytes, raw, tuple(encoding_candidates))
    except CsvParseError as exc:
        logger.error("Error parsing the CSV data from %s: %s", source_text, exc)
        return LoadResult(source=source_text, error=f"parse failed: {exc}")

    for issue in parsed.issues:
        logger.warning("Skipped malformed CSV line (%s): %s", issue.reason, ",".join(issue.line_fields))
    if parsed.missing_columns:
        logger.warning("CSV %s is missing required columns: %s", source_text, parsed.missing_columns)

    logger.info(
        "Loaded %d salary records from %s (%s)", len(parsed.records), source_text, parsed.encoding
    )
    return LoadResult(
        source=source_text,
        records=parsed.records,
        issues=parsed.issues,
        missing_columns=parsed.missing_columns,
        encoding=parsed.encoding,
    )


async def load_from_config(config: DashboardConfig) -> LoadResult:
    return await load_salary_data(
        config.csv_source,
        timeout=config.fetch_timeout_seconds,
        encoding_candidates=config.encoding_candidates,
    )
