"""Day-over-day delta transform."""

from __future__ import annotations

from typing import Sequence


def daily_deltas(cumulative: Sequence[float]) -> tuple[float, ...]:
    """Derive non-negative daily values from a cumulative series.

    Index 0 is kept as-is. Downward corrections in the source are
    floored at zero instead of producing negative daily counts.

    Args:
        cumulative: Aligned cumulative values.

    Returns:
        Daily values with the same length as the input.
    """
    deltas = []
    for index, value in enumerate(cumulative):
        if index == 0:
            deltas.append(value)
            continue
        deltas.append(max(0.0, value - cumulative[index - 1]))
    return tuple(deltas)
