"""Show command wiring for epicurve CLI.

This module prints an aligned dataset as a compact text table.
It is a quick way to check offsets and latest values without plotting.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import OUTPUT_DATE_FORMAT
from serve.chart_views import build_chart_views
from serve.report_sdk import EpicurveClient


def run_show_command(client: EpicurveClient, args: argparse.Namespace) -> int:
    """Handle show command invocation."""
    dataset = client.fetch_dataset(args.metric)
    print(f"metric={dataset.metric}")
    print(f"date={dataset.date.strftime(OUTPUT_DATE_FORMAT)}")
    print(f"start={dataset.start.strftime(OUTPUT_DATE_FORMAT)}")
    print(f"threshold={dataset.threshold:g}")
    for view in build_chart_views(dataset, client.profile.events):
        event = f"{view.event_x:.1f}" if view.event_x is not None else "-"
        print(
            f"{view.entity}\t"
            f"{dataset.cutoff[view.entity]}\t"
            f"{len(view.cumulative)}\t"
            f"{int(view.latest_cumulative)}\t"
            f"{int(view.latest_daily)}\t"
            f"{event}"
        )
    return 0


def add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print aligned offsets and latest values")
    parser.add_argument("--metric", required=True, help="Metric identifier, e.g. confirmed")
