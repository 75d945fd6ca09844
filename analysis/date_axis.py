"""Calendar labels for the chart's x-axis.

Day indices are anchored at a fixed epoch: index 0 is the epoch itself.
"""

from __future__ import annotations

from datetime import date, timedelta

from .dto import DateTick


def date_for_index(epoch: date, index: int) -> date:
    """Return the calendar date of a 0-based day index."""

    return epoch + timedelta(days=index)


def iso_date_for_index(epoch: date, index: int) -> str:
    """Return the `YYYY-MM-DD` date of a 0-based day index."""

    return date_for_index(epoch, index).isoformat()


def label_date_axis(length: int, *, epoch: date, tick_interval_days: int) -> tuple[DateTick, ...]:
    """Select a sparse set of day indices to label on the x-axis.

    Every `tick_interval_days`-th index is labeled starting at 0, and the last
    index is always labeled even when it falls between two intervals.

    Args:
        length: Number of days in the series.
        epoch: Calendar date of index 0.
        tick_interval_days: Spacing between labels, in days.

    Returns:
        DateTick entries in ascending index order.
    """

    if tick_interval_days <= 0:
        raise ValueError("tick_interval_days must be positive.")
    if length <= 0:
        return ()

    indices = list(range(0, length, tick_interval_days))
    if indices[-1] != length - 1:
        indices.append(length - 1)
    return tuple(DateTick(index=index, iso_date=iso_date_for_index(epoch, index)) for index in indices)
