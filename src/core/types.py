"""Shared typed models.

This module defines immutable data models used by the ingest,
transform, and serving layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterator, Literal, Mapping

from core.constants import DEFAULT_DATE_LAYOUTS, DEFAULT_SCHEMA

SchemaName = Literal["row", "column"]
EventDate = date | datetime


@dataclass(frozen=True)
class CsvTable:
    """Parsed CSV content.

    Attributes:
        header: Ordered column names.
        rows: Lazy iterator of data rows as string cells.
    """

    header: tuple[str, ...]
    rows: Iterator[list[str]]


@dataclass(frozen=True)
class Dataset:
    """Per-entity series for one metric.

    Attributes:
        date: Date of the most recent observation in the source.
        start: Date of index 0 of every unaligned series.
        table: Entity name to ordered daily values.
        cutoff: Entity name to day offset of the threshold crossing.
        metric: Metric identifier the dataset was built for.
        threshold: Cutoff value used for alignment, when aligned.
    """

    date: date
    start: date
    table: Mapping[str, tuple[float, ...]]
    cutoff: Mapping[str, int] = field(default_factory=dict)
    metric: str = ""
    threshold: float | None = None

    @property
    def entities(self) -> tuple[str, ...]:
        """Entity names in insertion order."""
        return tuple(self.table)

    @property
    def is_aligned(self) -> bool:
        """Return whether threshold alignment has run."""
        return self.threshold is not None


@dataclass(frozen=True)
class Correction:
    """One manual override of an upstream value.

    Attributes:
        entity: Entity whose series is patched.
        index: Zero-based day index relative to the dataset start.
        value: Replacement value.
        note: Provenance, usually the calendar date of the bad point.
    """

    entity: str
    index: int
    value: float
    note: str = ""


@dataclass(frozen=True)
class MetricSettings:
    """Per-metric report settings."""

    cutoff: float


@dataclass(frozen=True)
class ReportProfile:
    """Validated report options.

    Attributes:
        entities: Allow-list of entities, in legend order.
        metrics: Metric identifier to settings.
        events: Entity to absolute event date (lockdowns).
        corrections: Metric identifier to correction table.
        schema: Source schema variant name.
        date_layouts: Ordered strptime layouts for source dates.
    """

    entities: tuple[str, ...]
    metrics: Mapping[str, MetricSettings]
    events: Mapping[str, EventDate] = field(default_factory=dict)
    corrections: Mapping[str, tuple[Correction, ...]] = field(default_factory=dict)
    schema: SchemaName = DEFAULT_SCHEMA
    date_layouts: tuple[str, ...] = DEFAULT_DATE_LAYOUTS


@dataclass(frozen=True)
class EntityChartView:
    """Plot-ready series for one entity.

    Attributes:
        entity: Entity name.
        cumulative: Aligned cumulative values.
        daily: Non-negative daily deltas, same length as cumulative.
        event_x: Event position on the relative axis, if configured.
    """

    entity: str
    cumulative: tuple[float, ...]
    daily: tuple[float, ...]
    event_x: float | None = None

    @property
    def latest_cumulative(self) -> float:
        """Last cumulative value, zero for empty series."""
        return self.cumulative[-1] if self.cumulative else 0.0

    @property
    def latest_daily(self) -> float:
        """Last daily value, zero for empty series."""
        return self.daily[-1] if self.daily else 0.0


@dataclass(frozen=True)
class ChartRequest:
    """Everything the renderer needs for one image."""

    metric: str
    cutoff: float
    date: date
    views: tuple[EntityChartView, ...]
