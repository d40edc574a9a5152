from __future__ import annotations

from ml_salaries.aggregate import count_job_titles, summarize_by_year
from ml_salaries.models import JobTitleCount, YearSummary


def _row(year: str, salary: str, title: str = "ML Engineer") -> dict[str, str]:
    return {"work_year": year, "salary_in_usd": salary, "job_title": title}


def test_summarize_by_year_example() -> None:
    records = [
        _row("2021", "100000", "ML Engineer"),
        _row("2021", "200000", "Data Scientist"),
        _row("2019", "50000", "X"),
    ]

    assert summarize_by_year(records) == [
        YearSummary(year=2021, total_jobs=2, average_salary="150000.00")
    ]


def test_summarize_by_year_drops_unqualified_rows() -> None:
    records = [
        _row("2019", "100"),
        _row("2025", "100"),
        _row("twenty", "100"),
        _row("2022", "n/a"),
        _row("2022", ""),
        _row("", "100"),
        {"job_title": "no fields"},
    ]

    assert summarize_by_year(records) == []


def test_summarize_by_year_keeps_first_occurrence_order() -> None:
    records = [
        _row("2023", "10"),
        _row("2020", "20"),
        _row("2023", "30"),
        _row("2024", "40"),
    ]

    summaries = summarize_by_year(records)
    assert [s.year for s in summaries] == [2023, 2020, 2024]
    assert summaries[0] == YearSummary(year=2023, total_jobs=2, average_salary="20.00")


def test_summarize_by_year_accepts_range_boundaries() -> None:
    summaries = summarize_by_year([_row("2020", "1"), _row("2024", "2")])
    assert [s.year for s in summaries] == [2020, 2024]


def test_summarize_by_year_custom_range() -> None:
    summaries = summarize_by_year([_row("2019", "1"), _row("2021", "2")], min_year=2019, max_year=2019)
    assert summaries == [YearSummary(year=2019, total_jobs=1, average_salary="1.00")]


def test_summarize_by_year_groups_prefixed_year_text() -> None:
    summaries = summarize_by_year([_row("2021", "10"), _row("2021.0", "20")])
    assert summaries == [YearSummary(year=2021, total_jobs=2, average_salary="15.00")]


def test_count_job_titles_example() -> None:
    records = [
        _row("2021", "100000", "ML Engineer"),
        _row("2021", "200000", "Data Scientist"),
        _row("2019", "50000", "X"),
    ]

    assert count_job_titles(records, "2021") == [
        JobTitleCount(job_title="ML Engineer", count=1),
        JobTitleCount(job_title="Data Scientist", count=1),
    ]
    assert count_job_titles(records, 2021) == count_job_titles(records, "2021")


def test_count_job_titles_counts_in_first_occurrence_order() -> None:
    records = [
        _row("2022", "1", "B"),
        _row("2022", "1", "A"),
        _row("2022", "1", "B"),
        _row("2023", "1", "A"),
    ]

    assert count_job_titles(records, 2022) == [
        JobTitleCount(job_title="B", count=2),
        JobTitleCount(job_title="A", count=1),
    ]


def test_count_job_titles_matches_year_text_exactly() -> None:
    records = [_row("2021.0", "1", "A"), _row(" 2021", "1", "B"), _row("2021", "1", "C")]
    assert count_job_titles(records, 2021) == [JobTitleCount(job_title="C", count=1)]


def test_count_job_titles_ignores_salary_validity() -> None:
    records = [_row("2022", "n/a", "A")]
    assert count_job_titles(records, "2022") == [JobTitleCount(job_title="A", count=1)]


def test_count_job_titles_no_match_is_empty() -> None:
    assert count_job_titles([_row("2021", "1")], 2030) == []
    assert count_job_titles([], "2021") == []
    assert count_job_titles([_row("2021", "1")], None) == []
