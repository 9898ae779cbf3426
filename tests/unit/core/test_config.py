"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import EpicurveConfig
from core.errors import EpicurveConfigError


def test_from_env_reads_output_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve output directory from environment."""
    monkeypatch.setenv("EPICURVE_OUTPUT_DIR", "./.tmp-charts")

    config = EpicurveConfig.from_env()

    assert config.output_dir.name == ".tmp-charts"


def test_source_url_substitutes_metric(monkeypatch: pytest.MonkeyPatch) -> None:
    """Source URL template should be expanded per metric."""
    monkeypatch.setenv("EPICURVE_SOURCE_URL", "https://example.org/data/{metric}.csv")

    config = EpicurveConfig.from_env()

    assert config.source_url("deaths") == "https://example.org/data/deaths.csv"


def test_from_env_defaults_to_bounded_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fetches should be time-bounded even without configuration."""
    monkeypatch.delenv("EPICURVE_FETCH_TIMEOUT", raising=False)

    config = EpicurveConfig.from_env()

    assert config.fetch_timeout_s > 0


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric fetch timeout."""
    monkeypatch.setenv("EPICURVE_FETCH_TIMEOUT", "soon")

    with pytest.raises(EpicurveConfigError):
        EpicurveConfig.from_env()

    assert os.getenv("EPICURVE_FETCH_TIMEOUT") == "soon"


def test_from_env_raises_for_template_without_placeholder(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A source URL without a metric placeholder cannot serve several metrics."""
    monkeypatch.setenv("EPICURVE_SOURCE_URL", "https://example.org/data.csv")

    with pytest.raises(EpicurveConfigError):
        EpicurveConfig.from_env()


def test_from_env_raises_for_out_of_range_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject ports outside the TCP range."""
    monkeypatch.setenv("EPICURVE_PORT", "70000")

    with pytest.raises(EpicurveConfigError):
        EpicurveConfig.from_env()
