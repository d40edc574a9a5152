from __future__ import annotations

import argparse
import asyncio
import json
from dataclasses import asdict
from pathlib import Path

from .charts import chart_spec, yearly_jobs_chart
from .config import SORT_KEYS
from .controller import DashboardController
from .environment import assert_runtime_compatibility
from .runtime import configure_logging, dashboard_config_from_env


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ml-salaries",
        description="Summarize machine-learning salary records per year and per job title.",
    )
    parser.add_argument("--input", default=None, help="CSV path or http(s) URL (default: configured source)")
    parser.add_argument(
        "--sort-by",
        action="append",
        default=[],
        help=f"Sort the yearly table by a column ({', '.join(SORT_KEYS)}). "
        "Repeat to toggle direction.",
    )
    parser.add_argument("--year", default=None, help="Print the job-title breakdown for this year")
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("--chart-spec", default=None, help="Write the jobs-per-year Vega-Lite spec to this path")
    return parser


def main(argv: list[str] | None = None) -> int:
    assert_runtime_compatibility()
    args = _build_parser().parse_args(argv)
    configure_logging()

    config = dashboard_config_from_env()
    if args.input:
        config.csv_source = args.input

    controller = DashboardController(config=config)
    result = asyncio.run(controller.load())
    if not result.ok:
        print(f"Could not load salary data: {result.error}")
        return 1

    for key in args.sort_by:
        controller.sort_table(key)
    if args.year is not None:
        controller.select_year(args.year)

    if args.chart_spec:
        spec_path = Path(args.chart_spec)
        spec_path.parent.mkdir(parents=True, exist_ok=True)
        spec_path.write_text(json.dumps(chart_spec(yearly_jobs_chart(controller.table_rows)), indent=2), encoding="utf-8")

    if args.json:
        payload = {
            "source": result.source,
            "sort": asdict(controller.sorter.config),
            "years": [asdict(row) for row in controller.table_rows],
            "selected_year": controller.selection.selected_year,
            "job_titles": [asdict(row) for row in controller.job_titles],
        }
        print(json.dumps(payload, indent=2))
        return 0

    table_df = controller.table_frame()
    if table_df.empty:
        print(f"No salary rows between {config.min_year} and {config.max_year}.")
    else:
        print(table_df.to_string(index=False))

    if controller.selection.selected_year is not None:
        print(f"\nJob titles in {controller.selection.selected_year}:")
        titles_df = controller.job_title_frame()
        if titles_df.empty:
            print("No rows.")
        else:
            print(titles_df.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
