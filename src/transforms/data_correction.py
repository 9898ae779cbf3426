"""Manual data corrections.

This module overwrites known-bad upstream values with hand-checked
figures. Correction tables are injected per metric; a metric without
any correction must still be listed with an empty table.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from core.errors import MalformedInputError, UnsupportedMetricError
from core.logging_config import get_logger
from core.types import Correction, Dataset

_LOGGER = get_logger(__name__)


def correction_table(
    corrections: Mapping[str, tuple[Correction, ...]],
    metric: str,
) -> tuple[Correction, ...]:
    """Return the correction table for one metric.

    Args:
        corrections: Metric identifier to correction rows.
        metric: Metric identifier, case-insensitive.

    Returns:
        Correction rows, possibly empty.

    Raises:
        UnsupportedMetricError: If the metric has no table entry.
    """
    table = corrections.get(metric.lower())
    if table is None:
        known_rows = ", ".join(sorted(corrections)) or "none"
        raise UnsupportedMetricError(
            f"No correction table for metric '{metric}' (known: {known_rows}). "
            "Add an entry, empty if no correction is needed."
        )
    return table


def apply_corrections(
    dataset: Dataset,
    metric: str,
    corrections: Mapping[str, tuple[Correction, ...]],
) -> Dataset:
    """Apply a metric's correction table to unaligned series.

    Args:
        dataset: Dataset whose indices are relative to ``dataset.start``.
        metric: Metric identifier selecting the table.
        corrections: Metric identifier to correction rows.

    Returns:
        Dataset with corrected values.

    Raises:
        UnsupportedMetricError: If the metric has no table entry.
        MalformedInputError: If a correction points past the end of a series.
    """
    table = correction_table(corrections, metric)
    patched = {entity: list(values) for entity, values in dataset.table.items()}
    applied = 0
    for correction in table:
        series = patched.get(correction.entity)
        if series is None:
            continue
        if correction.index >= len(series):
            raise MalformedInputError(
                f"Correction for '{correction.entity}' at index {correction.index} "
                f"({correction.note or 'no note'}) is past the series end ({len(series)} days)."
            )
        series[correction.index] = correction.value
        applied += 1
    _LOGGER.debug("corrections_applied", metric=metric, applied=applied, listed=len(table))
    return replace(dataset, table={entity: tuple(values) for entity, values in patched.items()})
