"""Epicurve exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class EpicurveError(Exception):
    """Base exception for all epicurve failures."""


class EpicurveConfigError(EpicurveError):
    """Raised for invalid runtime configuration or report profiles."""


class FetchError(EpicurveError):
    """Raised for transport failures or non-success HTTP status codes."""


class FetchTimeoutError(FetchError):
    """Raised when the source did not answer within the fetch timeout."""


class MalformedInputError(EpicurveError):
    """Raised when source CSV content cannot be parsed."""


class UnknownEntityError(EpicurveError):
    """Raised when a configured entity is missing from a source header."""


class DateParseError(EpicurveError):
    """Raised when no configured date layout matches a value."""


class UnsupportedMetricError(EpicurveError):
    """Raised when a metric has no correction table or settings."""
