"""Altair chart and table frame builders for the salary dashboard."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Sequence

import altair as alt
import pandas as pd

from .models import JobTitleCount, YearSummary

YEAR_SUMMARY_COLUMNS = ["year", "total_jobs", "average_salary"]
JOB_TITLE_COLUMNS = ["job_title", "count"]

LINE_COLOR = "#38bdf8"


def year_summaries_frame(rows: Sequence[YearSummary]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=YEAR_SUMMARY_COLUMNS)
    return pd.DataFrame([asdict(row) for row in rows], columns=YEAR_SUMMARY_COLUMNS)


def job_title_frame(rows: Sequence[JobTitleCount]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=JOB_TITLE_COLUMNS)
    return pd.DataFrame([asdict(row) for row in rows], columns=JOB_TITLE_COLUMNS)


def yearly_jobs_chart(rows: Sequence[YearSummary], *, height: int = 300) -> alt.Chart:
    frame = year_summaries_frame(rows)
    return (
        alt.Chart(frame)
        .mark_line(point=True, strokeWidth=3, color=LINE_COLOR)
        .encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("total_jobs:Q", title="Number of Jobs"),
            tooltip=[
                alt.Tooltip("year:O", title="Year"),
                alt.Tooltip("total_jobs:Q", title="Number of Jobs"),
                alt.Tooltip("average_salary:N", title="Average Salary (USD)"),
            ],
        )
        .properties(height=height)
    )


def chart_spec(chart: alt.Chart) -> dict[str, Any]:
    return chart.to_dict()
