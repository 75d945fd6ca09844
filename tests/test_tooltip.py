"""Unit tests for tooltip placement."""

from __future__ import annotations

import pytest

from analysis.tooltip import position_tooltip

pytestmark = pytest.mark.unit


def test_tooltip_is_centered_above_point() -> None:
    """Away from the edges the tooltip is centered 80px above the point."""

    position = position_tooltip(500, 150, width=180, height=72, bounds_width=1300)
    assert (position.left, position.top) == (410, 70)


def test_tooltip_clamps_to_left_edge() -> None:
    """Near the left edge the tooltip keeps a 12px margin."""

    assert position_tooltip(70, 150, width=180, height=72, bounds_width=1300).left == 12


def test_tooltip_clamps_to_right_edge() -> None:
    """Near the right edge the tooltip keeps a 12px margin."""

    assert position_tooltip(1276, 150, width=180, height=72, bounds_width=1300).left == 1300 - 180 - 12


def test_tooltip_clamps_to_top_edge() -> None:
    """Points near the top push the tooltip down to the margin."""

    assert position_tooltip(500, 18, width=180, height=72, bounds_width=1300).top == 12


@pytest.mark.parametrize("bounds_width", [720, 1300])
def test_tooltip_stays_inside_plot(bounds_width: float) -> None:
    """Every point inside the plot yields a tooltip within the margins."""

    for point_x in range(70, int(bounds_width) - 24 + 1, 7):
        position = position_tooltip(point_x, 100, width=180, height=72, bounds_width=bounds_width)
        assert position.left >= 12
        assert position.left + 180 <= bounds_width - 12
        assert position.top >= 12
