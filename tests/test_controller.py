from __future__ import annotations

import asyncio
from pathlib import Path

from ml_salaries.config import DashboardConfig
from ml_salaries.controller import DashboardController
from ml_salaries.models import JobTitleCount, LoadResult, YearSummary

SAMPLE_CSV = Path(__file__).resolve().parents[1] / "sample_data" / "salaries.csv"


def _loaded_controller() -> DashboardController:
    controller = DashboardController(config=DashboardConfig(csv_source=str(SAMPLE_CSV)))
    asyncio.run(controller.load())
    return controller


def test_controller_starts_empty() -> None:
    controller = DashboardController()
    assert controller.records == []
    assert controller.table_rows == []
    assert controller.job_titles == []
    assert controller.selection.selected_year is None
    assert controller.load_error is None
    assert controller.table_frame().empty


def test_controller_loads_sample_data() -> None:
    controller = _loaded_controller()

    assert controller.load_error is None
    assert len(controller.records) == 14
    assert controller.table_rows == [
        YearSummary(year=2024, total_jobs=3, average_salary="171666.67"),
        YearSummary(year=2023, total_jobs=3, average_salary="120500.00"),
        YearSummary(year=2022, total_jobs=2, average_salary="110000.00"),
        YearSummary(year=2021, total_jobs=2, average_salary="148600.00"),
        YearSummary(year=2020, total_jobs=1, average_salary="95000.00"),
    ]


def test_controller_sort_and_select() -> None:
    controller = _loaded_controller()

    controller.sort_table("year")
    assert [r.year for r in controller.table_rows] == [2020, 2021, 2022, 2023, 2024]
    controller.sort_table("year")
    assert [r.year for r in controller.table_rows] == [2024, 2023, 2022, 2021, 2020]

    titles = controller.select_year(controller.table_rows[2].year)
    assert controller.selection.selected_year == "2022"
    assert titles == [
        JobTitleCount(job_title="Machine Learning Engineer", count=1),
        JobTitleCount(job_title="Research Scientist", count=1),
        JobTitleCount(job_title="Data Scientist", count=1),
    ]
    assert list(controller.job_title_frame()["count"]) == [1, 1, 1]


def test_controller_selection_is_recomputed() -> None:
    controller = _loaded_controller()

    controller.select_year("2024")
    assert controller.job_titles[0] == JobTitleCount(job_title="Machine Learning Engineer", count=2)

    assert controller.select_year(2030) == []
    assert controller.selection.selected_year == "2030"
    assert controller.job_title_frame().empty


def test_controller_fetch_failure_leaves_state_empty(tmp_path: Path) -> None:
    controller = DashboardController(config=DashboardConfig(csv_source=str(tmp_path / "missing.csv")))

    result = asyncio.run(controller.load())

    assert not result.ok
    assert controller.load_error is not None
    assert controller.records == []
    assert controller.table_rows == []
    assert controller.sort_table("year") == []
    assert controller.select_year(2021) == []


def test_controller_failed_result_keeps_previous_rows() -> None:
    controller = DashboardController()
    controller.apply_load_result(
        LoadResult(
            source="memory",
            records=[{"work_year": "2021", "salary_in_usd": "10", "job_title": "A"}],
        )
    )
    controller.apply_load_result(LoadResult(source="memory", error="fetch failed: boom"))

    assert controller.load_error == "fetch failed: boom"
    assert controller.table_rows == [YearSummary(year=2021, total_jobs=1, average_salary="10.00")]
