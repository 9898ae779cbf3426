"""Fixture locations for epicurve tests."""

from __future__ import annotations

from pathlib import Path

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"


def fixture_path(relative_path: str) -> Path:
    """Return the absolute path of a file under tests/fixtures."""
    return FIXTURES_ROOT / relative_path


def profile_path(name: str) -> str:
    """Return a report profile fixture path as a string, as the CLI receives it."""
    return str(FIXTURES_ROOT / "profiles" / f"{name}.yaml")
