"""Orchestration entry points for the analytics engine.

The dashboard state is a one-way recomputation pipeline; every stage is a pure
function of the previous one:

    DashboardSelection -> StatCard / target -> ChartResult -> HoverState -> HoverDetail

Nothing is mutated in place, so a new selection simply supersedes the previous
chart and any hover computed against it. This module must not import Django.
"""

from __future__ import annotations

from loguru import logger

from .axis import plan_axis
from .date_axis import iso_date_for_index, label_date_axis
from .dto import (
    ChartConfig,
    ChartResult,
    DashboardResult,
    DashboardSelection,
    HoverDetail,
    HoverState,
    PlotGeometry,
    StatDefinition,
)
from .metrics import build_stat_cards, get_stat_definition, reader_questions_for, stat_target
from .projection import CoordinateProjector, line_path
from .timeline import synthesize_cumulative_series
from .tooltip import position_tooltip
from .units import format_axis_value, format_unit_value


def build_chart(
    stat: StatDefinition,
    *,
    target: float,
    geometry: PlotGeometry,
    config: ChartConfig,
) -> ChartResult:
    """Synthesize, scale and project the history chart of one stat.

    Args:
        stat: Stat to chart.
        target: Value the synthesized history must end on.
        geometry: Plot geometry.
        config: Chart settings (history length, epoch, ticks).

    Returns:
        ChartResult ready for rendering.
    """

    series = synthesize_cumulative_series(config.history_length, target, stat.shape)
    max_value = max(point.value for point in series)
    axis = plan_axis(max_value, config.tick_count, stat.axis_max)
    projector = CoordinateProjector(geometry, length=len(series), scale_max=axis.scale_max)
    points = projector.project(series)
    return ChartResult(
        stat_key=stat.key,
        unit_label=stat.unit_label,
        series=series,
        axis=axis,
        points=points,
        svg_width=projector.svg_width,
        line_path=line_path(points),
        date_ticks=label_date_axis(
            len(series),
            epoch=config.epoch,
            tick_interval_days=config.tick_interval_days,
        ),
        y_axis_labels=tuple(format_axis_value(value, unit_label=stat.unit_label) for value in axis.tick_values),
        geometry=geometry,
        epoch=config.epoch,
    )


def chart_for_selection(
    selection: DashboardSelection,
    *,
    geometry: PlotGeometry,
    config: ChartConfig,
) -> ChartResult | None:
    """Return the chart of the selected stat, or None when no stat is open."""

    if selection.stat_key is None:
        return None
    stat = get_stat_definition(selection.stat_key)
    if stat is None:
        return None
    target = stat_target(
        stat,
        revenue_type=selection.revenue_type,
        project_category=selection.project_category,
    )
    return build_chart(stat, target=target, geometry=geometry, config=config)


def build_dashboard(
    selection: DashboardSelection,
    *,
    geometry: PlotGeometry | None = None,
    config: ChartConfig | None = None,
) -> DashboardResult:
    """Build the full dashboard payload for a selection.

    Args:
        selection: Current selection (revenue type, project, open stat).
        geometry: Optional plot geometry; defaults to PlotGeometry().
        config: Optional chart settings; defaults to ChartConfig().

    Returns:
        DashboardResult with stat cards, reader questions and the open chart.
    """

    geometry = geometry or PlotGeometry()
    config = config or ChartConfig()

    warnings: list[str] = []
    if selection.stat_key is not None and get_stat_definition(selection.stat_key) is None:
        warnings.append(f"Unknown stat {selection.stat_key!r}; no chart rendered.")
        logger.warning("Unknown stat requested", stat_key=selection.stat_key)

    return DashboardResult(
        selection=selection,
        stats=build_stat_cards(selection),
        questions=reader_questions_for(selection.project_category),
        chart=chart_for_selection(selection, geometry=geometry, config=config),
        warnings=tuple(warnings),
    )


def resolve_hover(
    chart: ChartResult,
    *,
    pointer_x: float,
    rendered_width: float,
    previous: HoverState | None = None,
) -> HoverState | None:
    """Map a pointer position to the hovered day of a chart.

    Each call is computed from scratch; `previous` is only returned when the
    pointer cannot be mapped at all (empty chart or collapsed element).

    Args:
        chart: Chart under the pointer.
        pointer_x: Pointer x relative to the plot element's left edge.
        rendered_width: Rendered width of the plot element.
        previous: Hover state before this event.

    Returns:
        The new HoverState.
    """

    projector = CoordinateProjector(chart.geometry, length=len(chart.points), scale_max=chart.axis.scale_max)
    index = projector.index_for_pointer(pointer_x, rendered_width)
    if index is None:
        return previous
    return HoverState(index=index)


def describe_hover(chart: ChartResult, hover: HoverState | None, *, config: ChartConfig) -> HoverDetail | None:
    """Return tooltip content and placement for a hover state.

    Args:
        chart: Chart the hover belongs to.
        hover: Current hover, or None.
        config: Chart settings providing the tooltip size.

    Returns:
        HoverDetail, or None when nothing is hovered or the index does not
        belong to this chart.
    """

    if hover is None or not 0 <= hover.index < len(chart.points):
        return None
    point = chart.points[hover.index]
    return HoverDetail(
        index=hover.index,
        point=point,
        iso_date=iso_date_for_index(chart.epoch, hover.index),
        formatted_value=format_unit_value(point.value, unit_label=chart.unit_label),
        tooltip=position_tooltip(
            point.x,
            point.y,
            width=config.tooltip_width,
            height=config.tooltip_height,
            bounds_width=chart.svg_width,
        ),
    )
