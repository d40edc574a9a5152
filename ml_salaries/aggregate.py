from __future__ import annotations

from typing import Any, Iterable

from .config import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from .models import JobTitleCount, RawRecord, YearSummary
from .normalization import (
    format_average,
    is_year_in_range,
    normalize_year_selection,
    parse_salary,
    parse_year,
)


def summarize_by_year(
    records: Iterable[RawRecord],
    *,
    min_year: int = DEFAULT_MIN_YEAR,
    max_year: int = DEFAULT_MAX_YEAR,
) -> list[YearSummary]:
    """Reduce records to one summary per qualifying year.

    Rows whose year falls outside ``[min_year, max_year]`` or whose salary is not
    a finite number are dropped without error. Output follows the order in which
    each year first appears.
    """
    counts: dict[int, int] = {}
    totals: dict[int, float] = {}
    for row in records:
        year = parse_year(row.get("work_year"))
        salary = parse_salary(row.get("salary_in_usd"))
        if year is None or salary is None or not is_year_in_range(year, min_year, max_year):
            continue

        counts[year] = counts.get(year, 0) + 1
        totals[year] = totals.get(year, 0.0) + salary

    return [
        YearSummary(
            year=year,
            total_jobs=count,
            average_salary=format_average(totals[year], count),
        )
        for year, count in counts.items()
    ]


def count_job_titles(records: Iterable[RawRecord], year: Any) -> list[JobTitleCount]:
    selected = normalize_year_selection(year)
    if selected is None:
        return []

    counts: dict[str, int] = {}
    for row in records:
        if row.get("work_year") != selected:
            continue
        job_title = row.get("job_title") or ""
        counts[job_title] = counts.get(job_title, 0) + 1

    return [JobTitleCount(job_title=title, count=count) for title, count in counts.items()]
