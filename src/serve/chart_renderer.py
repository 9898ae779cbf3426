"""Chart rendering for aligned epidemic curves.

This module draws two stacked charts with matplotlib: cumulative values
on a log scale with a growth reference curve, and daily values on a
linear scale. Event markers are dashed vertical lines in the entity's
colour. Figures are built without pyplot so concurrent requests never
share global figure state.
"""

from __future__ import annotations

import io
from typing import Any

from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from core.constants import (
    CHART_DPI,
    CHART_HEIGHT_CM,
    CHART_WIDTH_CM,
    CHART_X_TICKS,
    GROWTH_REFERENCE_LABEL,
    GROWTH_REFERENCE_RATE,
    OUTPUT_DATE_FORMAT,
)
from core.logging_config import get_logger
from core.types import ChartRequest, EntityChartView

_LOGGER = get_logger(__name__)
_CM_PER_INCH = 2.54
_LEGEND_FONT = {"family": "monospace"}
_SOFT_COLORS = (
    "#f15a60",
    "#7ac36a",
    "#5a9bd4",
    "#faa75b",
    "#9e67ab",
    "#ce7058",
    "#d77fb4",
)
_DASHES = (
    (0, (6, 2)),
    (0, (2, 2)),
    (0, (10, 3, 2, 3)),
    (0, (4, 4)),
    (0, (8, 2, 2, 2, 2, 2)),
    (0, (1, 3)),
)


def render_chart(request: ChartRequest) -> bytes:
    """Render cumulative and daily charts into one PNG image.

    Args:
        request: Metric, cutoff, data date, and per-entity views.

    Returns:
        PNG-encoded image bytes.
    """
    figure = Figure(
        figsize=(CHART_WIDTH_CM / _CM_PER_INCH, CHART_HEIGHT_CM / _CM_PER_INCH),
        dpi=CHART_DPI,
    )
    cumulative_axis, daily_axis = figure.subplots(2, 1)
    _plot_cumulative_axis(cumulative_axis, request)
    _plot_daily_axis(daily_axis, request)
    figure.tight_layout()
    buffer = io.BytesIO()
    figure.savefig(buffer, format="png")
    _LOGGER.info(
        "chart_rendered",
        metric=request.metric,
        date=request.date.strftime(OUTPUT_DATE_FORMAT),
        entities=len(request.views),
        size_bytes=buffer.tell(),
    )
    return buffer.getvalue()


def _plot_cumulative_axis(axis: Any, request: ChartRequest) -> None:
    """Render cumulative curves, lockdown markers, and growth reference."""
    curve_handles = []
    event_handles = []
    for index, view in enumerate(request.views):
        color = _soft_color(index)
        (line,) = axis.plot(
            range(len(view.cumulative)),
            view.cumulative,
            color=color,
            linewidth=2,
            label=f"{view.entity} {int(view.latest_cumulative):8d}",
        )
        curve_handles.append(line)
        if view.event_x is not None:
            event_handles.append(_plot_event_line(axis, view, index, color))
    data_max = max((max(view.cumulative) for view in request.views if view.cumulative), default=0.0)
    length = max((len(view.cumulative) for view in request.views), default=0)
    curve_handles.extend(_plot_growth_reference(axis, request.cutoff, length, data_max * 2))
    axis.set_yscale("log")
    if data_max > 0:
        axis.set_ylim(top=data_max * 2)
    axis.set_title(_chart_title(request, "cumulative"))
    _style_axis(axis, request)
    axis.legend(handles=curve_handles + event_handles, loc="lower right", prop=_LEGEND_FONT)


def _plot_daily_axis(axis: Any, request: ChartRequest) -> None:
    """Render daily curves and lockdown markers."""
    curve_handles = []
    event_handles = []
    for index, view in enumerate(request.views):
        color = _soft_color(index)
        (line,) = axis.plot(
            range(len(view.daily)),
            view.daily,
            color=color,
            linewidth=2,
            label=f"{int(view.latest_daily):8d} {view.entity}",
        )
        curve_handles.append(line)
        if view.event_x is not None:
            event_handles.append(_plot_event_line(axis, view, index, color))
    axis.yaxis.set_major_locator(MaxNLocator(CHART_X_TICKS))
    axis.set_title(_chart_title(request, "daily"))
    _style_axis(axis, request)
    axis.legend(handles=curve_handles + event_handles, loc="upper left", prop=_LEGEND_FONT)


def _plot_event_line(axis: Any, view: EntityChartView, index: int, color: str) -> Any:
    return axis.axvline(
        view.event_x,
        color=color,
        linestyle=_DASHES[index % len(_DASHES)],
        linewidth=2,
        label=f"{view.entity} - lockdown",
    )


def growth_reference(cutoff: float, length: int, limit: float) -> list[float]:
    """Return ``cutoff * 1.33**x`` for x in ``range(length)``, stopping past ``limit``.

    The first value above ``limit`` is kept so the curve reaches the axis
    edge. Nothing is computed beyond it.
    """
    values: list[float] = []
    if cutoff <= 0 or limit <= 0:
        return values
    value = cutoff
    for _ in range(length):
        values.append(value)
        if value > limit:
            break
        value *= GROWTH_REFERENCE_RATE
    return values


def _plot_growth_reference(axis: Any, cutoff: float, length: int, limit: float) -> list[Any]:
    ys = growth_reference(cutoff, length, limit)
    if not ys:
        return []
    (line,) = axis.plot(
        range(len(ys)),
        ys,
        color="#808080",
        linewidth=2,
        linestyle=_DASHES[1],
        label=GROWTH_REFERENCE_LABEL,
    )
    return [line]


def _style_axis(axis: Any, request: ChartRequest) -> None:
    axis.set_xlabel(f"Days from first {int(request.cutoff)} {request.metric} cases")
    axis.xaxis.set_major_locator(MaxNLocator(CHART_X_TICKS, integer=True))
    axis.grid(alpha=0.3)


def _chart_title(request: ChartRequest, kind: str) -> str:
    return f"CoVid-19 - {request.metric} ({kind}) - {request.date.strftime(OUTPUT_DATE_FORMAT)}"


def _soft_color(index: int) -> str:
    return _SOFT_COLORS[index % len(_SOFT_COLORS)]
