from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

SortKey = Literal["year", "total_jobs", "average_salary"]
SortDirection = Literal["ascending", "descending"]

DEFAULT_CSV_SOURCE = "sample_data/salaries.csv"
DEFAULT_MIN_YEAR = 2020
DEFAULT_MAX_YEAR = 2024


@dataclass(slots=True)
class DashboardConfig:
    csv_source: str = DEFAULT_CSV_SOURCE
    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = DEFAULT_MAX_YEAR
    fetch_timeout_seconds: float = 30.0

    encoding_candidates: tuple[str, ...] = field(
        default_factory=lambda: ("utf-8-sig", "utf-8", "latin-1")
    )


REQUIRED_COLUMNS: tuple[str, ...] = ("work_year", "salary_in_usd", "job_title")


SORT_KEYS: tuple[SortKey, ...] = ("year", "total_jobs", "average_salary")

# Aliases used by table header wording.
SORT_KEY_ALIASES: dict[str, SortKey] = {
    "totaljobs": "total_jobs",
    "jobs": "total_jobs",
    "averagesalary": "average_salary",
    "salary": "average_salary",
}


TABLE_COLUMN_LABELS: dict[str, str] = {
    "year": "Year",
    "total_jobs": "Number of Jobs",
    "average_salary": "Average Salary (USD)",
}

JOB_TITLE_COLUMN_LABELS: dict[str, str] = {
    "job_title": "Job Title",
    "count": "Number of Jobs",
}
