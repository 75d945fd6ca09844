"""Bidirectional mapping between chart data space and SVG pixel space.

The plot has a fixed height and grows horizontally: every day gets at least
`min_step` pixels, so long series widen the canvas (the container scrolls)
instead of compressing points together.
"""

from __future__ import annotations

from collections.abc import Sequence

from .dto import PlotGeometry, ProjectedPoint, SeriesPoint
from .rounding import round_half_up


class CoordinateProjector:
    """Map day indices and values to pixels, and pointer positions back to days.

    Args:
        geometry: Plot geometry (paddings, height, minimum width and step).
        length: Number of points in the series.
        scale_max: Value mapped to the top of the plot.
    """

    def __init__(self, geometry: PlotGeometry, *, length: int, scale_max: float) -> None:
        self.geometry = geometry
        self.length = length
        self.scale_max = scale_max
        self.svg_width = max(
            geometry.min_width,
            geometry.padding_left + geometry.padding_right + max(0, length - 1) * geometry.min_step,
        )
        self.plot_width = self.svg_width - geometry.padding_left - geometry.padding_right
        self.step = self.plot_width / (length - 1) if length > 1 else self.plot_width

    def x_for_index(self, index: int) -> float:
        """Return the x coordinate of a day index."""

        return self.geometry.padding_left + index * self.step

    def y_for_value(self, value: float) -> float:
        """Return the y coordinate of a value.

        A non-positive `scale_max` places every value on the baseline.
        """

        ratio = value / self.scale_max if self.scale_max > 0 else 0
        return self.geometry.padding_top + (1 - ratio) * self.geometry.plot_height

    def project(self, series: Sequence[SeriesPoint]) -> tuple[ProjectedPoint, ...]:
        """Place each series point in pixel space.

        Args:
            series: Points to project, in day order.

        Returns:
            ProjectedPoint entries aligned with `series`.
        """

        return tuple(
            ProjectedPoint(
                day=point.day,
                value=point.value,
                is_week_boundary=point.is_week_boundary,
                x=self.x_for_index(index),
                y=self.y_for_value(point.value),
            )
            for index, point in enumerate(series)
        )

    def index_for_pointer(self, pointer_x: float, rendered_width: float) -> int | None:
        """Return the day index nearest to a pointer position.

        The pointer is given in element-local CSS pixels; the element may be
        rendered at a different width than its SVG user-space width.

        Args:
            pointer_x: Pointer x relative to the element's left edge.
            rendered_width: Rendered width of the element in CSS pixels.

        Returns:
            An index in `[0, length - 1]`, or None when there is nothing to
            hover (empty series or a collapsed element).
        """

        if self.length <= 0 or rendered_width <= 0:
            return None

        scale_x = self.svg_width / rendered_width
        relative_x = pointer_x * scale_x
        clamped_x = max(
            self.geometry.padding_left,
            min(self.svg_width - self.geometry.padding_right, relative_x),
        )
        index = round_half_up((clamped_x - self.geometry.padding_left) / self.step)
        return max(0, min(self.length - 1, index))


def line_path(points: Sequence[ProjectedPoint]) -> str:
    """Return SVG path data connecting points with straight segments.

    Args:
        points: Projected points in drawing order.

    Returns:
        `"M x0,y0 L x1,y1 ..."`, or an empty string when there are no points.
    """

    if not points:
        return ""
    return "M " + " L ".join(f"{_svg_number(point.x)},{_svg_number(point.y)}" for point in points)


def _svg_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
