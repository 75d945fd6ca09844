"""Synthetic cumulative time series.

The dashboard shows history charts for figures that only exist as a single
current total. This module fabricates a believable daily history for such a
total: raw daily increments are shaped (wave, drift, weekly bonus, trend
segments, ripple), then rescaled so that the cumulative series lands exactly on
the target. The result is fully deterministic.
"""

from __future__ import annotations

import math

from loguru import logger

from .dto import SeriesPoint, ShapeConfig
from .rounding import round_half_up

WAVE_PERIOD_DIVISOR = 4.5
JITTER_PERIOD = 5
JITTER_AMPLITUDE = 0.04
MIN_INCREMENT = 1


def is_week_boundary(day: int) -> bool:
    """Return True when a 1-based day closes a 7-day week."""

    return day % 7 == 0


def raw_increments(length: int, shape: ShapeConfig) -> tuple[float, ...]:
    """Compute unscaled daily increments for days 2..length.

    Args:
        length: Number of days in the series.
        shape: Shape parameters.

    Returns:
        `length - 1` increments; increment `i` belongs to calendar day `i + 2`.
    """

    if length <= 1:
        return ()

    multipliers = shape.segment_multipliers or (1,)
    segment_count = len(multipliers)
    segment_size = math.ceil((length - 1) / segment_count)

    increments: list[float] = []
    for index in range(length - 1):
        day = index + 2
        wave = round_half_up(abs(math.sin(index / WAVE_PERIOD_DIVISOR)) * shape.daily_wave)
        drift = shape.daily_drift * index
        daily_step = shape.daily_base + wave + drift
        weekly_boost = shape.weekly_bonus if is_week_boundary(day) else 0
        segment_index = min(index // segment_size, segment_count - 1)
        jitter = 1 + ((index % JITTER_PERIOD) - 2) * JITTER_AMPLITUDE
        increments.append(max(MIN_INCREMENT, (daily_step + weekly_boost) * multipliers[segment_index] * jitter))
    return tuple(increments)


def synthesize_cumulative_series(length: int, target: float, shape: ShapeConfig) -> tuple[SeriesPoint, ...]:
    """Build a day-indexed cumulative series that ends exactly on `target`.

    Day 1 is always zero. Intermediate days carry independently rounded
    cumulative sums; the final day is forced to `target` regardless of the
    rounding drift accumulated before it.

    Args:
        length: Number of days to emit.
        target: Cumulative value of the final day.
        shape: Shape parameters for the daily increments.

    Returns:
        A tuple of exactly `max(length, 1)` SeriesPoint values.
    """

    if length <= 1:
        return (SeriesPoint(day=1, value=0, is_week_boundary=True),)

    increments = raw_increments(length, shape)
    total = 0.0
    for increment in increments:
        total += increment
    scale = target / total if total > 0 else 0

    points = [SeriesPoint(day=1, value=0, is_week_boundary=is_week_boundary(1))]
    running = 0.0
    for day in range(2, length + 1):
        running += increments[day - 2] * scale
        value = target if day == length else max(0, round_half_up(running))
        points.append(SeriesPoint(day=day, value=value, is_week_boundary=is_week_boundary(day)))

    logger.debug("Synthesized cumulative series", length=length, target=target, scale=scale)
    return tuple(points)
