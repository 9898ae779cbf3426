"""Unit tests for threshold alignment."""

from __future__ import annotations

from datetime import date

from core.types import Dataset
from transforms.threshold_alignment import align_dataset, align_series


def test_align_series_truncates_at_first_crossing() -> None:
    """Day zero is the first value at or above the cutoff."""
    aligned, offset = align_series([0, 5, 50, 150, 300], 100)

    assert aligned == (150, 300) and offset == 3


def test_align_series_keeps_series_that_never_crosses() -> None:
    """Series below the cutoff are kept whole with offset 0."""
    aligned, offset = align_series([0, 1, 2], 100)

    assert aligned == (0, 1, 2) and offset == 0


def test_align_series_accepts_empty_series() -> None:
    """Empty series are a valid degenerate case."""
    assert align_series([], 10) == ((), 0)


def test_align_series_crossing_on_last_day_leaves_one_value() -> None:
    """Length-one aligned series are valid."""
    assert align_series([1.0, 2.0, 10.0], 10) == ((10.0,), 2)


def test_align_dataset_records_offset_for_every_entity() -> None:
    """Every aligned entity gets a cutoff entry, reached or not."""
    dataset = Dataset(
        date=date(2020, 1, 26),
        start=date(2020, 1, 22),
        table={"Alpha": (0.0, 5.0, 50.0, 150.0, 300.0), "Gamma": (1.0, 2.0, 3.0, 3.0, 3.0)},
    )

    aligned = align_dataset(dataset, 100.0)

    assert aligned.cutoff == {"Alpha": 3, "Gamma": 0}
    assert aligned.table["Gamma"] == dataset.table["Gamma"]
    assert aligned.is_aligned and not dataset.is_aligned
