"""Unit tests for the dashboard recomputation pipeline."""

from __future__ import annotations

from dataclasses import replace

import pytest

from analysis.categories import ProjectCategory, RevenueType
from analysis.dto import ChartConfig, DashboardSelection, HoverState, PlotGeometry
from analysis.engine import build_chart, build_dashboard, chart_for_selection, describe_hover, resolve_hover
from analysis.metrics import get_stat_definition

pytestmark = pytest.mark.unit


def test_build_dashboard_without_open_stat_has_no_chart() -> None:
    """Stat cards and questions are built even when no chart is open."""

    result = build_dashboard(DashboardSelection())

    assert result.chart is None
    assert len(result.stats) == 3
    assert len(result.questions) == 6
    assert result.warnings == ()


def test_build_dashboard_revenue_chart(geometry: PlotGeometry, chart_config: ChartConfig) -> None:
    """The revenue chart lands on the headline target under a fixed ceiling."""

    result = build_dashboard(DashboardSelection(stat_key="revenue"), geometry=geometry, config=chart_config)
    chart = result.chart
    assert chart is not None

    assert len(chart.series) == 68
    assert chart.series[-1].value == result.stats[0].target == 22450
    assert chart.axis.scale_max == 25000
    assert chart.axis.tick_values == (0, 6250, 12500, 18750, 25000)
    assert chart.y_axis_labels == ("￥0", "￥6250", "￥12500", "￥18750", "￥25000")
    assert chart.svg_width == 1300
    assert chart.date_ticks[0].iso_date == "2025-11-01"
    assert chart.date_ticks[-1].index == 67
    assert chart.line_path.startswith("M 70,190 L ")
    assert chart.points[-1].y == pytest.approx(18 + (1 - 22450 / 25000) * 172)


def test_chart_respects_selection_multipliers(geometry: PlotGeometry, chart_config: ChartConfig) -> None:
    """Changing the project rescales the synthesized history."""

    selection = DashboardSelection(
        revenue_type=RevenueType.course,
        project_category=ProjectCategory.minimalist_living,
        stat_key="total_subscriptions",
    )
    chart = chart_for_selection(selection, geometry=geometry, config=chart_config)
    assert chart is not None
    assert chart.series[-1].value == 1280
    assert chart.axis.scale_max == 4000
    assert chart.y_axis_labels[-1] == "4000"


def test_build_dashboard_unknown_stat_warns() -> None:
    """An unknown stat yields a warning instead of a chart."""

    result = build_dashboard(DashboardSelection(stat_key="page_views"))

    assert result.chart is None
    assert result.warnings == ("Unknown stat 'page_views'; no chart rendered.",)


def test_build_chart_without_ceiling_uses_nice_max(geometry: PlotGeometry) -> None:
    """Stats without a fixed ceiling fall back to the nice axis maximum."""

    stat = get_stat_definition("revenue")
    assert stat is not None
    unbounded = replace(stat, axis_max=None)
    chart = build_chart(unbounded, target=23450, geometry=geometry, config=ChartConfig(history_length=30))

    assert chart.axis.scale_max == 30000
    assert len(chart.points) == 30


def test_resolve_hover_maps_pointer_to_day(geometry: PlotGeometry, chart_config: ChartConfig) -> None:
    """Pointer positions on grid points hover exactly that day."""

    chart = chart_for_selection(DashboardSelection(stat_key="revenue"), geometry=geometry, config=chart_config)
    assert chart is not None

    for index in (0, 10, 67):
        hover = resolve_hover(chart, pointer_x=chart.points[index].x, rendered_width=chart.svg_width)
        assert hover == HoverState(index=index)


def test_resolve_hover_is_idempotent(geometry: PlotGeometry, chart_config: ChartConfig) -> None:
    """The same pointer position hovers the same day regardless of history."""

    chart = chart_for_selection(DashboardSelection(stat_key="revenue"), geometry=geometry, config=chart_config)
    assert chart is not None

    first = resolve_hover(chart, pointer_x=400, rendered_width=650, previous=HoverState(index=3))
    second = resolve_hover(chart, pointer_x=400, rendered_width=650, previous=first)
    assert first == second


def test_resolve_hover_keeps_previous_when_unmappable(geometry: PlotGeometry, chart_config: ChartConfig) -> None:
    """A collapsed plot element leaves the hover unchanged."""

    chart = chart_for_selection(DashboardSelection(stat_key="revenue"), geometry=geometry, config=chart_config)
    assert chart is not None

    previous = HoverState(index=12)
    assert resolve_hover(chart, pointer_x=400, rendered_width=0, previous=previous) is previous


def test_describe_hover_formats_tooltip(geometry: PlotGeometry, chart_config: ChartConfig) -> None:
    """Hover details carry the date, the unit-formatted value and a clamped box."""

    chart = chart_for_selection(DashboardSelection(stat_key="revenue"), geometry=geometry, config=chart_config)
    assert chart is not None

    detail = describe_hover(chart, HoverState(index=67), config=chart_config)
    assert detail is not None
    assert detail.iso_date == "2026-01-07"
    assert detail.formatted_value == "￥22,450"
    assert detail.tooltip.left == chart.svg_width - chart_config.tooltip_width - 12
    assert detail.tooltip.top >= 12

    first = describe_hover(chart, HoverState(index=0), config=chart_config)
    assert first is not None
    assert first.tooltip.left == 12
    assert first.formatted_value == "￥0"


def test_describe_hover_ignores_foreign_index(geometry: PlotGeometry) -> None:
    """An index from a longer series does not belong to a shorter chart."""

    config = ChartConfig(history_length=10)
    chart = chart_for_selection(DashboardSelection(stat_key="active_subscriptions"), geometry=geometry, config=config)
    assert chart is not None

    assert describe_hover(chart, HoverState(index=40), config=config) is None
    assert describe_hover(chart, None, config=config) is None
