from __future__ import annotations

import asyncio

import streamlit as st

from ml_salaries.charts import yearly_jobs_chart
from ml_salaries.config import JOB_TITLE_COLUMN_LABELS, SORT_KEYS, TABLE_COLUMN_LABELS
from ml_salaries.controller import DashboardController
from ml_salaries.environment import assert_runtime_compatibility
from ml_salaries.runtime import configure_logging, dashboard_config_from_env


assert_runtime_compatibility()
configure_logging()

st.set_page_config(page_title="ML Engineer Salaries", layout="wide")


def _get_controller() -> DashboardController:
    controller = st.session_state.get("dashboard")
    if controller is None:
        controller = DashboardController(config=dashboard_config_from_env())
        with st.spinner("Loading salary data..."):
            asyncio.run(controller.load())
        st.session_state["dashboard"] = controller
    return controller


def _sort_label(controller: DashboardController, key: str) -> str:
    label = TABLE_COLUMN_LABELS[key]
    config = controller.sorter.config
    if config.key != key:
        return label
    return f"{label} {'▲' if config.direction == 'ascending' else '▼'}"


def _render_chart(controller: DashboardController) -> None:
    st.altair_chart(yearly_jobs_chart(controller.table_rows), use_container_width=True)


def _render_year_table(controller: DashboardController) -> None:
    header_cols = st.columns(len(SORT_KEYS))
    for col, key in zip(header_cols, SORT_KEYS):
        if col.button(_sort_label(controller, key), key=f"sort_{key}", use_container_width=True):
            controller.sort_table(key)
            st.rerun()

    table_df = controller.table_frame().rename(columns=TABLE_COLUMN_LABELS)
    config = controller.sorter.config
    # Row positions change with every sort, so each ordering gets its own widget state.
    event = st.dataframe(
        table_df,
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"year_table_{config.key}_{config.direction}",
    )
    selected_rows = event.selection.rows if event is not None else []
    if selected_rows:
        row = controller.table_rows[selected_rows[0]]
        if controller.selection.selected_year != str(row.year):
            controller.select_year(row.year)


def _render_job_titles(controller: DashboardController) -> None:
    selected_year = controller.selection.selected_year
    if selected_year is None:
        st.info("Please select a year from the table above to view job titles and details.")
        return

    st.markdown(f"### Job Titles in {selected_year}")
    titles_df = controller.job_title_frame()
    if titles_df.empty:
        st.info(f"No rows for {selected_year}.")
        return
    st.dataframe(
        titles_df.rename(columns=JOB_TITLE_COLUMN_LABELS),
        use_container_width=True,
        hide_index=True,
    )


controller = _get_controller()

st.title(f"Machine Learning Engineer Salaries ({controller.config.min_year}-{controller.config.max_year})")

if controller.load_error:
    st.caption(f"Source: {controller.config.csv_source} (not loaded)")

_render_chart(controller)
_render_year_table(controller)
_render_job_titles(controller)
