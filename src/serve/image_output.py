"""Rendered image persistence."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from core.constants import IMAGE_FILE_TEMPLATE


def ensure_output_dir(output_dir: str | Path) -> Path:
    """Create and return resolved image output directory.

    Args:
        output_dir: Configured output directory.

    Returns:
        Resolved output path.
    """
    resolved_path = Path(output_dir).expanduser().resolve()
    resolved_path.mkdir(parents=True, exist_ok=True)
    return resolved_path


def image_path(output_dir: str | Path, metric: str) -> Path:
    """Return the default image file path for a metric."""
    return Path(output_dir) / IMAGE_FILE_TEMPLATE.format(metric=metric.lower())


def save_image(payload: bytes, path: str | Path) -> Path:
    """Write PNG bytes to disk atomically, creating parent directories.

    The bytes go to a temporary sibling file that replaces ``path`` in one
    step, so concurrent writers never leave an interleaved image.

    Args:
        payload: PNG-encoded image.
        path: Destination file path.

    Returns:
        Resolved written path.
    """
    target = Path(path).expanduser().resolve()
    ensure_output_dir(target.parent)
    file_descriptor, temp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(file_descriptor, "wb") as temp_file:
            temp_file.write(payload)
        os.replace(temp_name, target)
    except OSError:
        Path(temp_name).unlink(missing_ok=True)
        raise
    return target
