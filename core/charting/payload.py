"""JSON payloads for the analytics dashboard endpoints."""

from __future__ import annotations

from typing import TypedDict

from analysis.dto import ChartResult, DashboardResult, HoverDetail, ProjectedPoint, ReaderQuestion, StatCard


class PointPayload(TypedDict):
    """A projected chart point."""

    day: int
    value: float
    isWeekBoundary: bool
    x: float
    y: float


class AxisTickPayload(TypedDict):
    """A y-axis tick with its grid line position and label."""

    value: int
    y: float
    label: str


class DateTickPayload(TypedDict):
    """An x-axis date label anchored to a point."""

    index: int
    isoDate: str
    x: float


class ChartPayload(TypedDict):
    """Render-ready chart for one stat."""

    stat: str
    unit: str
    svgWidth: float
    svgHeight: float
    plot: dict[str, float]
    scaleMax: float
    yTicks: list[AxisTickPayload]
    xTicks: list[DateTickPayload]
    points: list[PointPayload]
    linePath: str


class HoverPayload(TypedDict):
    """Tooltip content and placement for the hovered point."""

    index: int
    isoDate: str
    value: float
    formattedValue: str
    point: PointPayload
    tooltip: dict[str, float]


def point_payload(point: ProjectedPoint) -> PointPayload:
    """Serialize a projected point."""

    return {
        "day": point.day,
        "value": point.value,
        "isWeekBoundary": point.is_week_boundary,
        "x": point.x,
        "y": point.y,
    }


def chart_payload(chart: ChartResult) -> ChartPayload:
    """Serialize a ChartResult.

    Args:
        chart: Chart returned by the analytics engine.

    Returns:
        ChartPayload with tick positions resolved against the chart geometry.
    """

    geometry = chart.geometry
    scale_max = chart.axis.scale_max
    y_ticks: list[AxisTickPayload] = []
    for value, label in zip(chart.axis.tick_values, chart.y_axis_labels):
        ratio = value / scale_max if scale_max > 0 else 0
        y_ticks.append(
            {
                "value": value,
                "y": geometry.padding_top + (1 - ratio) * geometry.plot_height,
                "label": label,
            }
        )

    x_ticks: list[DateTickPayload] = [
        {"index": tick.index, "isoDate": tick.iso_date, "x": chart.points[tick.index].x}
        for tick in chart.date_ticks
        if tick.index < len(chart.points)
    ]

    return {
        "stat": chart.stat_key,
        "unit": chart.unit_label,
        "svgWidth": chart.svg_width,
        "svgHeight": geometry.height,
        "plot": {
            "left": geometry.padding_left,
            "right": chart.svg_width - geometry.padding_right,
            "top": geometry.padding_top,
            "bottom": geometry.plot_bottom,
        },
        "scaleMax": scale_max,
        "yTicks": y_ticks,
        "xTicks": x_ticks,
        "points": [point_payload(point) for point in chart.points],
        "linePath": chart.line_path,
    }


def hover_payload(detail: HoverDetail) -> HoverPayload:
    """Serialize a HoverDetail."""

    return {
        "index": detail.index,
        "isoDate": detail.iso_date,
        "value": detail.point.value,
        "formattedValue": detail.formatted_value,
        "point": point_payload(detail.point),
        "tooltip": {"left": detail.tooltip.left, "top": detail.tooltip.top},
    }


def stat_card_payload(card: StatCard) -> dict[str, object]:
    """Serialize a stat card."""

    return {
        "key": card.key,
        "title": card.title,
        "target": card.target,
        "value": card.display_value,
        "change": card.change,
        "unitLabel": card.unit_label,
        "unitName": card.unit_name,
    }


def question_payload(question: ReaderQuestion) -> dict[str, object]:
    """Serialize a reader question."""

    return {
        "id": question.id,
        "question": question.question,
        "timestamp": question.timestamp,
        "fileReference": question.file_reference,
        "count": question.count,
    }


def dashboard_payload(result: DashboardResult, *, hover: HoverDetail | None = None) -> dict[str, object]:
    """Serialize a DashboardResult.

    Args:
        result: Dashboard computed for the current selection.
        hover: Hover detail for the open chart, if any.

    Returns:
        JSON-ready mapping.
    """

    selection = result.selection
    return {
        "selection": {
            "revenueType": selection.revenue_type.value,
            "projectCategory": selection.project_category.value,
            "stat": selection.stat_key,
        },
        "stats": [stat_card_payload(card) for card in result.stats],
        "questions": [question_payload(question) for question in result.questions],
        "chart": chart_payload(result.chart) if result.chart is not None else None,
        "hover": hover_payload(hover) if hover is not None else None,
        "warnings": list(result.warnings),
    }
