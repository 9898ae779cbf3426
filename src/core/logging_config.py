"""Structured logging setup for epicurve.

Every module logs through ``get_logger(__name__)``: snake_case event
names with keyword fields, rendered as one JSON object per line. The
minimum level comes from ``EPICURVE_LOG_LEVEL`` (default ``info``).
"""

from __future__ import annotations

import logging
import os
from typing import Any

import structlog

LOG_LEVEL_ENV = "EPICURVE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "info"

_CONFIGURED = False


def get_logger(name: str) -> Any:
    """Return a structured logger bound to a module name.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger emitting JSON lines.
    """
    _configure_once()
    return structlog.get_logger(name)


def resolve_log_level(raw_value: str | None) -> int | None:
    """Map a level name such as ``debug`` or ``WARNING`` to its number.

    Returns None when the name is not a standard logging level.
    """
    if raw_value is None or not raw_value.strip():
        return logging.INFO
    level = logging.getLevelName(raw_value.strip().upper())
    return level if isinstance(level, int) else None


def _configure_once() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    raw_level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = resolve_log_level(raw_level)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level or logging.INFO),
        # each call builds a PrintLogger on the current sys.stdout
        cache_logger_on_first_use=False,
    )
    _CONFIGURED = True
    if level is None:
        structlog.get_logger(__name__).warning(
            "invalid_log_level",
            env=LOG_LEVEL_ENV,
            value=raw_level,
            fallback=DEFAULT_LOG_LEVEL,
        )
