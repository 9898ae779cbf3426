"""Unit tests for plot-ready chart views."""

from __future__ import annotations

from datetime import date

from core.types import Dataset
from serve.chart_views import build_chart_request, build_chart_views


def _aligned_dataset() -> Dataset:
    return Dataset(
        date=date(2020, 1, 26),
        start=date(2020, 1, 22),
        table={"Alpha": (150.0, 300.0), "Gamma": (1.0, 1.0, 2.0, 0.0, 3.0)},
        cutoff={"Alpha": 3, "Gamma": 0},
        metric="confirmed",
        threshold=100.0,
    )


def test_build_chart_views_pairs_cumulative_and_daily() -> None:
    """Daily values are derived from the aligned cumulative series."""
    views = build_chart_views(_aligned_dataset(), {})

    assert views[0].daily == (150.0, 150.0)
    assert views[1].daily == (1.0, 0.0, 1.0, 0.0, 3.0)


def test_build_chart_views_projects_configured_events() -> None:
    """Only entities with events carry an x position."""
    views = build_chart_views(_aligned_dataset(), {"Alpha": date(2020, 1, 27)})

    assert [view.event_x for view in views] == [2.0, None]


def test_build_chart_request_carries_metric_and_cutoff() -> None:
    """The renderer request mirrors dataset metadata."""
    request = build_chart_request(_aligned_dataset(), {})

    assert (request.metric, request.cutoff, request.date) == (
        "confirmed",
        100.0,
        date(2020, 1, 26),
    )
