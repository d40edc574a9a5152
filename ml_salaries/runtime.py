from __future__ import annotations

import logging
import os
from typing import Any

from .config import DEFAULT_CSV_SOURCE, DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR, DashboardConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def csv_source() -> str:
    return os.getenv("ML_SALARIES_CSV_SOURCE", DEFAULT_CSV_SOURCE).strip() or DEFAULT_CSV_SOURCE


def log_level() -> str:
    level = os.getenv("ML_SALARIES_LOG_LEVEL", "INFO").strip().upper()
    if level not in logging.getLevelNamesMapping():
        return "INFO"
    return level


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or log_level(), format=LOG_FORMAT)


def _int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _float(value: Any, default: float) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return float(default)
    return parsed if parsed > 0 else float(default)


def dashboard_config_from_env() -> DashboardConfig:
    min_year = _int(os.getenv("ML_SALARIES_MIN_YEAR"), DEFAULT_MIN_YEAR)
    max_year = _int(os.getenv("ML_SALARIES_MAX_YEAR"), DEFAULT_MAX_YEAR)
    if min_year > max_year:
        min_year, max_year = DEFAULT_MIN_YEAR, DEFAULT_MAX_YEAR

    return DashboardConfig(
        csv_source=csv_source(),
        min_year=min_year,
        max_year=max_year,
        fetch_timeout_seconds=_float(os.getenv("ML_SALARIES_FETCH_TIMEOUT"), 30.0),
    )
