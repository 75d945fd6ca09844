"""Vertical axis planning.

Derives a readable axis ceiling and evenly spaced tick values from the largest
value in a series.
"""

from __future__ import annotations

import math

from .dto import AxisPlan
from .errors import ChartGeometryError
from .rounding import round_half_up


def nice_step(max_value: float, tick_count: int) -> float:
    """Return a tick spacing rounded to 1, 2 or 5 times a power of ten.

    Args:
        max_value: Largest value the axis must show.
        tick_count: Number of ticks including zero.

    Returns:
        The tick spacing; 1 when `max_value` is not positive.
    """

    if max_value <= 0:
        return 1
    rough_step = max_value / (tick_count - 1)
    magnitude = 10 ** math.floor(math.log10(rough_step))
    residual = rough_step / magnitude
    if residual <= 1:
        return magnitude
    if residual <= 2:
        return 2 * magnitude
    if residual <= 5:
        return 5 * magnitude
    return 10 * magnitude


def plan_axis(max_value: float, tick_count: int, ceiling_override: float | None = None) -> AxisPlan:
    """Plan the vertical axis for a series.

    A caller-supplied ceiling keeps the axis stable across selections but
    never clips data: the larger of the ceiling and `max_value` wins.

    Args:
        max_value: Largest series value (non-negative).
        tick_count: Number of ticks including zero; at least 2.
        ceiling_override: Optional fixed axis ceiling; `None` or 0 means none.

    Returns:
        AxisPlan with `scale_max >= max_value`.

    Raises:
        ChartGeometryError: When `tick_count` is below 2.
    """

    if tick_count < 2:
        raise ChartGeometryError(field="tick_count", value=tick_count, reason="at least 2 ticks are required")

    if ceiling_override:
        scale_max = max(ceiling_override, max_value)
    else:
        step = nice_step(max_value, tick_count)
        scale_max = math.ceil(max_value / step) * step

    tick_step = scale_max / (tick_count - 1)
    tick_values = tuple(round_half_up(index * tick_step) for index in range(tick_count))
    return AxisPlan(scale_max=scale_max, tick_values=tick_values)
