"""Rounding helpers shared by the chart computations."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending `.5` ties towards +infinity.

    Python's built-in `round` uses banker's rounding; charts round ties up so
    that `2.5 -> 3` and `-2.5 -> -2`.

    Args:
        value: Value to round.

    Returns:
        The rounded integer.
    """

    return math.floor(value + 0.5)
