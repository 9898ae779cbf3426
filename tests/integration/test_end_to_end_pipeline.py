"""Integration tests for the reader-to-delta pipeline."""

from __future__ import annotations

from datetime import date

from core.profile import load_profile
from ingest.pipeline import DatasetPipeline, build_dataset
from serve.chart_views import build_chart_views
from tests.fixture_paths import fixture_path, profile_path


def test_row_source_produces_hand_computed_series() -> None:
    """Reader, filter, accumulator, aligner, and deltas agree with hand values."""
    profile = load_profile(profile_path("small"))

    with fixture_path("jhu_small.csv").open("rb") as stream:
        dataset = build_dataset(stream, profile, "confirmed")
    views = {view.entity: view for view in build_chart_views(dataset, profile.events)}

    assert dataset.cutoff == {"Alpha": 3, "Beta": 3, "Gamma": 0}
    assert views["Alpha"].cumulative == (150.0, 300.0)
    assert views["Alpha"].daily == (150.0, 150.0)
    assert views["Beta"].cumulative == (120.0, 150.0)
    assert views["Beta"].daily == (120.0, 30.0)
    assert views["Gamma"].cumulative == (1.0, 1.0, 2.0, 0.0, 3.0)
    assert views["Gamma"].daily == (1.0, 0.0, 1.0, 0.0, 3.0)
    assert views["Alpha"].event_x == 2.0 and "Delta" not in views


def test_column_source_applies_corrections_before_alignment() -> None:
    """Row-per-day sources share the pipeline and corrections use start-relative indices."""
    profile = load_profile(profile_path("column"))

    with fixture_path("daily_small.csv").open("rb") as stream:
        dataset = DatasetPipeline(profile, "confirmed").build(stream)
    views = {view.entity: view for view in build_chart_views(dataset, profile.events)}

    assert dataset.start == date(2020, 3, 1) and dataset.date == date(2020, 3, 5)
    assert views["Gamma"].cumulative == (1.0, 1.0, 2.0, 2.0, 3.0)
    assert views["Gamma"].daily == (1.0, 0.0, 1.0, 0.0, 1.0)
    assert views["Beta"].event_x == 2.5
