"""Tooltip placement for the hovered chart point."""

from __future__ import annotations

from .dto import TooltipPosition

TOOLTIP_MARGIN = 12
TOOLTIP_OFFSET_Y = 80


def position_tooltip(
    point_x: float,
    point_y: float,
    *,
    width: float,
    height: float,
    bounds_width: float,
) -> TooltipPosition:
    """Center a tooltip above a point while keeping it inside the plot.

    Args:
        point_x: Hovered point x, relative to the plot container.
        point_y: Hovered point y, relative to the plot container.
        width: Tooltip width.
        height: Tooltip height; placement depends only on the width.
        bounds_width: Width of the scrollable plot container.

    Returns:
        TooltipPosition with a left edge in `[12, bounds_width - width - 12]`
        whenever the container is wide enough to hold the tooltip.
    """

    left = min(max(point_x - width / 2, TOOLTIP_MARGIN), bounds_width - width - TOOLTIP_MARGIN)
    top = max(point_y - TOOLTIP_OFFSET_Y, TOOLTIP_MARGIN)
    return TooltipPosition(left=left, top=top)
