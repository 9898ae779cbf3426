"""Per-entity series accumulation.

This module builds one ordered value sequence per allow-listed entity.
Row-oriented sources sum duplicate entity rows element-wise; column-
oriented sources append one value per entity for each day row.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.errors import MalformedInputError


class SeriesAccumulator:
    """Mutable builder for entity series within a single ingest run."""

    def __init__(self, entities: Sequence[str], length: int = 0) -> None:
        """Create an accumulator.

        Args:
            entities: Allow-listed entities, in output order.
            length: Initial zero-filled length of every series.
        """
        self._length = length
        self._table: dict[str, list[float]] = {entity: [0.0] * length for entity in entities}

    @property
    def length(self) -> int:
        """Current length shared by every series."""
        return self._length

    def add_row(self, entity: str, values: Sequence[float]) -> None:
        """Sum one entity row into that entity's running series.

        Args:
            entity: Allow-listed entity name.
            values: One value per day column.

        Raises:
            MalformedInputError: If the row length differs from the series length.
        """
        if len(values) != self._length:
            raise MalformedInputError(
                f"Row for '{entity}' has {len(values)} day values, expected {self._length}."
            )
        series = self._table[entity]
        for index, value in enumerate(values):
            series[index] += value

    def append_day(self, values: Mapping[str, float]) -> None:
        """Append one day of values, one per tracked entity."""
        for entity, series in self._table.items():
            series.append(values[entity])
        self._length += 1

    def build(self) -> dict[str, tuple[float, ...]]:
        """Return immutable copies of the accumulated series."""
        return {entity: tuple(series) for entity, series in self._table.items()}
