"""Unit tests for log level resolution."""

from __future__ import annotations

import logging

from core.logging_config import resolve_log_level


def test_resolve_log_level_accepts_any_case() -> None:
    """Level names are matched case-insensitively."""
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(" Warning ") == logging.WARNING


def test_resolve_log_level_defaults_blank_to_info() -> None:
    """An unset or blank value means info."""
    assert resolve_log_level(None) == logging.INFO
    assert resolve_log_level("") == logging.INFO


def test_resolve_log_level_rejects_unknown_names() -> None:
    """Unknown names are reported as None so the caller can fall back."""
    assert resolve_log_level("chatty") is None
