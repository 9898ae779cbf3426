"""Unit tests for chart rendering."""

from __future__ import annotations

from datetime import date

from core.types import ChartRequest, EntityChartView
from serve.chart_renderer import growth_reference, render_chart

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_render_chart_returns_png_bytes() -> None:
    """Rendering should produce a PNG image with events and degenerate series."""
    request = ChartRequest(
        metric="confirmed",
        cutoff=100.0,
        date=date(2020, 4, 21),
        views=(
            EntityChartView("Alpha", (150.0, 300.0, 420.0), (150.0, 150.0, 120.0), 1.5),
            EntityChartView("Gamma", (0.0, 1.0), (0.0, 1.0)),
            EntityChartView("Empty", (), ()),
        ),
    )

    payload = render_chart(request)

    assert payload.startswith(_PNG_SIGNATURE)


def test_render_chart_handles_request_without_views() -> None:
    """An empty profile still renders a blank chart."""
    request = ChartRequest(metric="deaths", cutoff=10.0, date=date(2020, 4, 21), views=())

    assert render_chart(request).startswith(_PNG_SIGNATURE)


def test_render_chart_handles_multi_year_series() -> None:
    """Series longer than the reference curve can represent still render."""
    cumulative = tuple(float(100 + day) for day in range(2600))
    daily = (100.0,) + (1.0,) * 2599
    request = ChartRequest(
        metric="confirmed",
        cutoff=100.0,
        date=date(2027, 3, 1),
        views=(EntityChartView("Alpha", cumulative, daily),),
    )

    assert render_chart(request).startswith(_PNG_SIGNATURE)


def test_growth_reference_stops_one_step_past_limit() -> None:
    """The reference curve ends at the first value above the axis top."""
    values = growth_reference(100.0, 5000, 400.0)

    assert values[0] == 100.0 and len(values) == 6
    assert values[-2] <= 400.0 < values[-1]


def test_growth_reference_is_empty_without_cutoff_or_data() -> None:
    """Zero cutoff or an empty axis draws no reference."""
    assert growth_reference(0.0, 10, 400.0) == []
    assert growth_reference(100.0, 10, 0.0) == []
