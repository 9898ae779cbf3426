"""Plot-ready views derived from aligned datasets."""

from __future__ import annotations

from typing import Mapping

from core.types import ChartRequest, Dataset, EntityChartView, EventDate
from transforms.daily_delta import daily_deltas
from transforms.event_projection import project_events


def build_chart_views(
    dataset: Dataset,
    events: Mapping[str, EventDate],
) -> tuple[EntityChartView, ...]:
    """Derive cumulative, daily, and event positions per entity.

    Args:
        dataset: Aligned dataset.
        events: Entity to absolute event date.

    Returns:
        One view per entity, in dataset order.
    """
    positions = project_events(dataset, events)
    return tuple(
        EntityChartView(
            entity=entity,
            cumulative=tuple(values),
            daily=daily_deltas(values),
            event_x=positions.get(entity),
        )
        for entity, values in dataset.table.items()
    )


def build_chart_request(dataset: Dataset, events: Mapping[str, EventDate]) -> ChartRequest:
    """Bundle an aligned dataset into a renderer request."""
    return ChartRequest(
        metric=dataset.metric,
        cutoff=dataset.threshold if dataset.threshold is not None else 0.0,
        date=dataset.date,
        views=build_chart_views(dataset, events),
    )
