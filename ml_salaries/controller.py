from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from .aggregate import count_job_titles, summarize_by_year
from .charts import job_title_frame, year_summaries_frame
from .config import DashboardConfig
from .loader import load_from_config
from .models import JobTitleCount, LoadResult, RawRecord, SelectionState, YearSummary
from .normalization import normalize_year_selection
from .sorting import TableSorter


@dataclass
class DashboardController:
    """Owns the dashboard session state.

    State changes only through ``apply_load_result``/``load``, ``sort_table`` and
    ``select_year``. Until a load completes every view is empty.
    """

    config: DashboardConfig = field(default_factory=DashboardConfig)
    records: list[RawRecord] = field(default_factory=list)
    table_rows: list[YearSummary] = field(default_factory=list)
    sorter: TableSorter = field(default_factory=TableSorter)
    selection: SelectionState = field(default_factory=SelectionState)
    job_titles: list[JobTitleCount] = field(default_factory=list)
    load_result: LoadResult | None = None

    async def load(self) -> LoadResult:
        result = await load_from_config(self.config)
        self.apply_load_result(result)
        return result

    def apply_load_result(self, result: LoadResult) -> None:
        self.load_result = result
        if not result.ok:
            return
        self.records = result.records
        self.table_rows = summarize_by_year(
            result.records,
            min_year=self.config.min_year,
            max_year=self.config.max_year,
        )

    @property
    def load_error(self) -> str | None:
        if self.load_result is None:
            return None
        return self.load_result.error

    def sort_table(self, key: str) -> list[YearSummary]:
        self.table_rows = self.sorter.sort(self.table_rows, key)
        return self.table_rows

    def select_year(self, year: Any) -> list[JobTitleCount]:
        self.selection.selected_year = normalize_year_selection(year)
        self.job_titles = count_job_titles(self.records, self.selection.selected_year)
        return self.job_titles

    def table_frame(self) -> pd.DataFrame:
        return year_summaries_frame(self.table_rows)

    def job_title_frame(self) -> pd.DataFrame:
        return job_title_frame(self.job_titles)
