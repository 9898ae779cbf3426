"""Source date parsing with layout fallback."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from core.constants import DEFAULT_DATE_LAYOUTS
from core.errors import DateParseError


def parse_date(value: str, layouts: Sequence[str] = DEFAULT_DATE_LAYOUTS) -> date:
    """Parse a date string with the first matching layout.

    Args:
        value: Raw date text, e.g. ``"1/22/20"``.
        layouts: Ordered ``strptime`` layouts to try.

    Returns:
        Parsed calendar date.

    Raises:
        DateParseError: If no layout matches.
    """
    first_error: ValueError | None = None
    text = value.strip()
    for layout in layouts:
        try:
            return datetime.strptime(text, layout).date()
        except ValueError as error:
            if first_error is None:
                first_error = error
    raise DateParseError(
        f"Could not parse date '{value}' with layouts {list(layouts)}."
    ) from first_error
