"""Unit tests for per-entity series accumulation."""

from __future__ import annotations

import pytest

from core.errors import MalformedInputError
from ingest.series_accumulator import SeriesAccumulator


def test_add_row_sums_duplicate_entity_rows() -> None:
    """Regional rows of one country should be summed element-wise."""
    accumulator = SeriesAccumulator(["Beta"], 3)

    accumulator.add_row("Beta", [1.0, 2.0, 3.0])
    accumulator.add_row("Beta", [10.0, 20.0, 30.0])

    assert accumulator.build() == {"Beta": (11.0, 22.0, 33.0)}


def test_append_day_grows_every_series() -> None:
    """Row-per-day sources extend each entity by one value per row."""
    accumulator = SeriesAccumulator(["Alpha", "Beta"])

    accumulator.append_day({"Alpha": 1.0, "Beta": 2.0})
    accumulator.append_day({"Alpha": 3.0, "Beta": 4.0})

    assert accumulator.length == 2 and accumulator.build()["Beta"] == (2.0, 4.0)


def test_add_row_rejects_length_mismatch() -> None:
    """Rows must cover exactly the header's day columns."""
    accumulator = SeriesAccumulator(["Alpha"], 2)

    with pytest.raises(MalformedInputError):
        accumulator.add_row("Alpha", [1.0])
