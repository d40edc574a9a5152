from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import numpy as np

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CENTS = Decimal("0.01")


def snake_case(value: str) -> str:
    value = value.strip().replace("\u2013", "-")
    value = re.sub(r"[\-/]+", "_", value)
    value = re.sub(r"[\s]+", "_", value)
    value = re.sub(r"[^0-9a-zA-Z_]+", "", value)
    value = re.sub(r"_+", "_", value)
    return value.strip("_").lower()


def standardize_columns(columns: list[str]) -> list[str]:
    """Snake-case header names, suffixing repeats so every column stays addressable."""
    standardized: list[str] = []
    seen: dict[str, int] = {}
    for col in columns:
        base = snake_case(str(col))
        if base in seen:
            seen[base] += 1
            standardized.append(f"{base}_{seen[base]}")
        else:
            seen[base] = 0
            standardized.append(base)
    return standardized


def parse_year(value: Any) -> int | None:
    """Parse the leading integer of ``value`` ("2021.0" -> 2021, "abc" -> None)."""
    if value is None:
        return None
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_salary(value: Any) -> float | None:
    """Parse the leading decimal number of ``value``; non-finite results are rejected."""
    if value is None:
        return None
    match = _LEADING_FLOAT_RE.match(str(value))
    if not match:
        return None
    parsed = float(match.group(1))
    if not np.isfinite(parsed):
        return None
    return parsed


def is_year_in_range(year: int | None, min_year: int, max_year: int) -> bool:
    # Zero is never a usable year, even if the range were widened to include it.
    if not year:
        return False
    return min_year <= year <= max_year


def format_average(total: float, count: int) -> str:
    if count <= 0:
        raise ValueError("count must be positive")
    average = Decimal(total / count).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return format(average, "f")


def normalize_year_selection(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return str(int(value))
    text = str(value).strip()
    return text or None
