"""Threshold alignment transform.

This module shifts every series so index 0 is the first day its value
reached the cutoff, recording the shift for absolute-date projection.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from core.logging_config import get_logger
from core.types import Dataset

_LOGGER = get_logger(__name__)


def align_series(values: Sequence[float], cutoff: float) -> tuple[tuple[float, ...], int]:
    """Truncate a series at its first threshold crossing.

    Args:
        values: Unaligned cumulative values.
        cutoff: Minimum value defining day zero.

    Returns:
        Aligned suffix and its offset. A series that never reaches the
        cutoff is returned whole with offset 0.
    """
    for index, value in enumerate(values):
        if value >= cutoff:
            return tuple(values[index:]), index
    return tuple(values), 0


def align_dataset(dataset: Dataset, cutoff: float) -> Dataset:
    """Align every entity series of a dataset.

    Args:
        dataset: Unaligned dataset.
        cutoff: Minimum value defining day zero.

    Returns:
        Dataset with aligned series, per-entity offsets, and threshold set.
    """
    table = {}
    offsets = {}
    for entity, values in dataset.table.items():
        aligned, offset = align_series(values, cutoff)
        table[entity] = aligned
        offsets[entity] = offset
        if offset == 0 and values and values[0] < cutoff:
            _LOGGER.warning("threshold_not_reached", entity=entity, cutoff=cutoff)
    return replace(dataset, table=table, cutoff=offsets, threshold=cutoff)
