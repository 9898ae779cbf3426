"""Event projection onto the aligned time axis.

This module maps absolute event dates, such as lockdowns, to positions
measured in days since an entity crossed the alignment threshold.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Mapping

from core.constants import SECONDS_PER_DAY
from core.types import Dataset, EventDate


def project_event(event: EventDate, start: date, offset: int) -> float:
    """Project an absolute event onto the relative axis.

    Args:
        event: Event date, or datetime for sub-day precision.
        start: Date of index 0 of the unaligned series.
        offset: Threshold crossing offset of the entity.

    Returns:
        Days between the entity's day zero (midnight) and the event.
    """
    day_zero = start + timedelta(days=offset)
    if isinstance(event, datetime):
        baseline = datetime.combine(day_zero, time.min, tzinfo=event.tzinfo)
        return (event - baseline).total_seconds() / SECONDS_PER_DAY
    return float((event - day_zero).days)


def project_events(dataset: Dataset, events: Mapping[str, EventDate]) -> dict[str, float]:
    """Project configured events for entities present in an aligned dataset.

    Args:
        dataset: Aligned dataset.
        events: Entity to absolute event date.

    Returns:
        Entity to relative x position; entities without events are omitted.
    """
    positions = {}
    for entity in dataset.table:
        event = events.get(entity)
        if event is None:
            continue
        positions[entity] = project_event(event, dataset.start, dataset.cutoff.get(entity, 0))
    return positions
