"""Unit formatting helpers for dashboard labels.

Currency symbols are written before the number (`￥22,450`); every other unit
is a suffix label (`3,200人`).
"""

from __future__ import annotations

PREFIX_UNITS: frozenset[str] = frozenset({"$", "￥", "¥"})


def is_prefix_unit(unit_label: str) -> bool:
    """Return True when the unit is written before the number."""

    return unit_label in PREFIX_UNITS


def format_number(value: float, *, grouped: bool = False) -> str:
    """Format a number without a trailing `.0` for integral values.

    Args:
        value: Number to format.
        grouped: Whether to insert thousands separators.

    Returns:
        The formatted number.
    """

    if float(value).is_integer():
        value = int(value)
        return f"{value:,}" if grouped else str(value)
    formatted = f"{value:,.3f}" if grouped else f"{value:.3f}"
    return formatted.rstrip("0").rstrip(".")


def format_axis_value(value: float, *, unit_label: str) -> str:
    """Format a y-axis tick label.

    Prefix units are attached; suffix units are left to the axis title.
    """

    number = format_number(value)
    return f"{unit_label}{number}" if is_prefix_unit(unit_label) else number


def format_unit_value(value: float, *, unit_label: str) -> str:
    """Format a value with thousands separators and its unit.

    Args:
        value: Value to format.
        unit_label: Unit symbol or suffix label.

    Returns:
        `"{unit}{value}"` for prefix units, `"{value}{unit}"` otherwise.
    """

    number = format_number(value, grouped=True)
    return f"{unit_label}{number}" if is_prefix_unit(unit_label) else f"{number}{unit_label}"
