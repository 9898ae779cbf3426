"""Runtime configuration model for epicurve.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_FETCH_TIMEOUT_S,
    DEFAULT_HOST,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PORT,
    DEFAULT_SOURCE_URL_TEMPLATE,
    METRIC_PLACEHOLDER,
)
from core.errors import EpicurveConfigError


@dataclass(frozen=True)
class EpicurveConfig:
    """Validated runtime configuration.

    Attributes:
        source_url_template: Source URL with a ``{metric}`` placeholder.
        fetch_timeout_s: Upper bound in seconds for one source fetch.
        output_dir: Directory receiving rendered PNG copies.
        host: HTTP server bind host.
        port: HTTP server bind port.
    """

    source_url_template: str
    fetch_timeout_s: float
    output_dir: Path
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "EpicurveConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EpicurveConfigError: If environment values are invalid.
        """
        source_url_template = os.getenv("EPICURVE_SOURCE_URL", DEFAULT_SOURCE_URL_TEMPLATE)
        timeout_value = os.getenv("EPICURVE_FETCH_TIMEOUT", str(DEFAULT_FETCH_TIMEOUT_S))
        output_dir_value = os.getenv("EPICURVE_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        host = os.getenv("EPICURVE_HOST", DEFAULT_HOST)
        port_value = os.getenv("EPICURVE_PORT", str(DEFAULT_PORT))
        return cls(
            source_url_template=_validate_url_template(source_url_template),
            fetch_timeout_s=_parse_fetch_timeout(timeout_value),
            output_dir=Path(output_dir_value).expanduser().resolve(),
            host=host,
            port=_parse_port(port_value),
        )

    def source_url(self, metric: str) -> str:
        """Return the concrete source URL for one metric."""
        return self.source_url_template.replace(METRIC_PLACEHOLDER, metric)


def _validate_url_template(raw_value: str) -> str:
    if METRIC_PLACEHOLDER not in raw_value:
        raise EpicurveConfigError(
            f"Invalid EPICURVE_SOURCE_URL value '{raw_value}': "
            f"expected a '{METRIC_PLACEHOLDER}' placeholder. "
            "Use a template such as https://host/{metric}.csv."
        )
    return raw_value


def _parse_fetch_timeout(raw_value: str) -> float:
    """Parse the fetch timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        EpicurveConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise EpicurveConfigError(
            "Invalid EPICURVE_FETCH_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set EPICURVE_FETCH_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise EpicurveConfigError(
            f"Invalid EPICURVE_FETCH_TIMEOUT value: expected > 0, got {timeout}."
        )
    return timeout


def _parse_port(raw_value: str) -> int:
    try:
        port = int(raw_value)
    except ValueError as error:
        raise EpicurveConfigError(
            f"Invalid EPICURVE_PORT value: expected integer, got '{raw_value}'."
        ) from error
    if not 0 < port < 65536:
        raise EpicurveConfigError(f"Invalid EPICURVE_PORT value: {port} is out of range.")
    return port
