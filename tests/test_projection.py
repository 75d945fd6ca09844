"""Unit tests for the chart coordinate projector."""

from __future__ import annotations

import pytest

from analysis.dto import PlotGeometry, ProjectedPoint, SeriesPoint
from analysis.projection import CoordinateProjector, line_path

pytestmark = pytest.mark.unit


def _series(values: list[float]) -> tuple[SeriesPoint, ...]:
    return tuple(
        SeriesPoint(day=index + 1, value=value, is_week_boundary=(index + 1) % 7 == 0)
        for index, value in enumerate(values)
    )


def test_long_series_grow_the_canvas(geometry: PlotGeometry) -> None:
    """68 days at 18px per day exceed the minimum width."""

    projector = CoordinateProjector(geometry, length=68, scale_max=25000)

    assert projector.svg_width == 70 + 24 + 67 * 18
    assert projector.step == pytest.approx(18)
    assert projector.x_for_index(0) == 70
    assert projector.x_for_index(67) == pytest.approx(projector.svg_width - 24)


def test_short_series_stretch_to_minimum_width(geometry: PlotGeometry) -> None:
    """Short series spread across the minimum plot width."""

    projector = CoordinateProjector(geometry, length=5, scale_max=100)

    assert projector.svg_width == 720
    assert projector.step == pytest.approx((720 - 70 - 24) / 4)


def test_single_point_uses_full_plot_width_as_step(geometry: PlotGeometry) -> None:
    """A one-point series cannot divide by zero."""

    projector = CoordinateProjector(geometry, length=1, scale_max=1)

    assert projector.step == projector.plot_width
    assert projector.index_for_pointer(500, 720) == 0


def test_project_maps_values_to_plot_height(geometry: PlotGeometry) -> None:
    """Zero sits on the baseline and `scale_max` on the top padding."""

    projector = CoordinateProjector(geometry, length=3, scale_max=100)
    points = projector.project(_series([0, 50, 100]))

    assert [point.y for point in points] == pytest.approx([190, 104, 18])
    assert [point.x for point in points] == pytest.approx([70, 383, 696])
    assert points[1] == ProjectedPoint(day=2, value=50, is_week_boundary=False, x=points[1].x, y=points[1].y)


def test_project_zero_scale_places_points_on_baseline(geometry: PlotGeometry) -> None:
    """A flat zero series must not divide by a zero ceiling."""

    projector = CoordinateProjector(geometry, length=3, scale_max=0)
    assert {point.y for point in projector.project(_series([0, 0, 0]))} == {geometry.plot_bottom}


@pytest.mark.parametrize("length", [1, 2, 5, 37, 68, 200])
def test_grid_points_round_trip(geometry: PlotGeometry, length: int) -> None:
    """Feeding a projected x back into the inverse map recovers its index."""

    projector = CoordinateProjector(geometry, length=length, scale_max=100)
    for index in range(length):
        assert projector.index_for_pointer(projector.x_for_index(index), projector.svg_width) == index


def test_pointer_is_rescaled_from_rendered_width(geometry: PlotGeometry) -> None:
    """A canvas rendered at half size maps half-size pointer positions."""

    projector = CoordinateProjector(geometry, length=68, scale_max=100)
    rendered_width = projector.svg_width / 2

    for index in (0, 10, 33, 67):
        assert projector.index_for_pointer(projector.x_for_index(index) / 2, rendered_width) == index


def test_pointer_snaps_to_nearest_day(geometry: PlotGeometry) -> None:
    """Positions between days round to the nearest one, ties upward."""

    projector = CoordinateProjector(geometry, length=68, scale_max=100)
    width = projector.svg_width

    assert projector.index_for_pointer(70 + 18 * 4 + 8, width) == 4
    assert projector.index_for_pointer(70 + 18 * 4 + 10, width) == 5
    assert projector.index_for_pointer(70 + 18 * 4 + 9, width) == 5


@pytest.mark.parametrize("pointer_x", [-500, 0, 69.9])
def test_pointer_left_of_plot_clamps_to_first_day(geometry: PlotGeometry, pointer_x: float) -> None:
    """Pointers over the left padding hover the first day."""

    projector = CoordinateProjector(geometry, length=10, scale_max=100)
    assert projector.index_for_pointer(pointer_x, projector.svg_width) == 0


@pytest.mark.parametrize("pointer_x", [710, 720, 10_000])
def test_pointer_right_of_plot_clamps_to_last_day(geometry: PlotGeometry, pointer_x: float) -> None:
    """Pointers over the right padding hover the last day."""

    projector = CoordinateProjector(geometry, length=10, scale_max=100)
    assert projector.index_for_pointer(pointer_x, projector.svg_width) == 9


def test_pointer_on_empty_series_changes_nothing(geometry: PlotGeometry) -> None:
    """An empty series has nothing to hover."""

    projector = CoordinateProjector(geometry, length=0, scale_max=100)
    assert projector.index_for_pointer(100, 720) is None


def test_pointer_on_collapsed_element_changes_nothing(geometry: PlotGeometry) -> None:
    """A zero rendered width cannot be rescaled."""

    projector = CoordinateProjector(geometry, length=10, scale_max=100)
    assert projector.index_for_pointer(100, 0) is None


def test_line_path_joins_points(geometry: PlotGeometry) -> None:
    """Path data moves to the first point and draws lines to the rest."""

    projector = CoordinateProjector(geometry, length=5, scale_max=100)
    points = projector.project(_series([0, 25, 50, 75, 100]))

    assert line_path(points) == "M 70,190 L 226.5,147 L 383,104 L 539.5,61 L 696,18"
    assert line_path(()) == ""
