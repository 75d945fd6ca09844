"""DTO types returned by the analytics engine.

DTOs are plain data containers used to transport chart results to the UI.
They intentionally avoid any Django/ORM dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import date

from .categories import ProjectCategory, RevenueType


@dataclass(frozen=True, slots=True)
class ShapeConfig:
    """Shape parameters for a synthesized cumulative series.

    Attributes:
        daily_base: Base daily increment before scaling.
        daily_wave: Amplitude of the slow sine wave added to each day.
        weekly_bonus: Extra increment applied on every 7th calendar day.
        daily_drift: Linear growth added per day index.
        segment_multipliers: Piecewise multipliers applied to contiguous
            blocks of the day range, in order.
    """

    daily_base: float
    daily_wave: float
    weekly_bonus: float
    daily_drift: float = 0
    segment_multipliers: tuple[float, ...] = (1,)


@dataclass(frozen=True, slots=True)
class StatDefinition:
    """Definition of a dashboard stat and how its history is synthesized.

    Attributes:
        key: Stable stat key used by UI selection and charting.
        title: Human-friendly title.
        base_target: Current total before selection multipliers are applied.
        unit_label: Unit symbol (prefix) or suffix label.
        unit_name: Long unit name shown above the chart.
        axis_max: Fixed axis ceiling keeping the chart stable across selections.
        shape: Shape parameters for the synthesized history.
        scales_with_revenue_type: Whether the revenue-type multiplier applies.
    """

    key: str
    title: str
    base_target: int
    unit_label: str
    unit_name: str
    axis_max: float | None
    shape: ShapeConfig
    scales_with_revenue_type: bool = False


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """A single day of a cumulative series.

    Attributes:
        day: 1-based calendar day within the history window.
        value: Cumulative value at the end of that day.
        is_week_boundary: True when `day` is a multiple of 7.
    """

    day: int
    value: float
    is_week_boundary: bool


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    """A SeriesPoint placed in pixel space.

    Attributes:
        day: 1-based calendar day.
        value: Cumulative value.
        is_week_boundary: True when `day` is a multiple of 7.
        x: Horizontal position in SVG user units.
        y: Vertical position in SVG user units.
    """

    day: int
    value: float
    is_week_boundary: bool
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class AxisPlan:
    """Vertical axis ceiling and tick values.

    Attributes:
        scale_max: Value mapped to the top of the plot.
        tick_values: Evenly spaced tick values from 0 to `scale_max`.
    """

    scale_max: float
    tick_values: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class HoverState:
    """The day index currently under the pointer."""

    index: int


@dataclass(frozen=True, slots=True)
class PlotGeometry:
    """Render geometry for the horizontally scrollable plot.

    Attributes:
        min_width: Minimum SVG width; long series grow past it.
        height: Total SVG height.
        padding_left: Space reserved for y-axis labels.
        padding_right: Right padding.
        padding_top: Top padding.
        padding_bottom: Space reserved for x-axis labels.
        min_step: Minimum pixel distance between consecutive days.
    """

    min_width: float = 720
    height: float = 230
    padding_left: float = 70
    padding_right: float = 24
    padding_top: float = 18
    padding_bottom: float = 40
    min_step: float = 18

    @property
    def plot_height(self) -> float:
        """Return the drawable height between top and bottom padding."""

        return self.height - self.padding_top - self.padding_bottom

    @property
    def plot_bottom(self) -> float:
        """Return the y coordinate of the x-axis baseline."""

        return self.padding_top + self.plot_height


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """Non-geometric chart settings.

    Attributes:
        history_length: Number of days in each synthesized series.
        epoch: Calendar date of day 1.
        tick_count: Number of y-axis ticks.
        tick_interval_days: Spacing of x-axis date labels.
        tooltip_width: Tooltip box width in pixels.
        tooltip_height: Tooltip box height in pixels.
    """

    history_length: int = 68
    epoch: date = date(2025, 11, 1)
    tick_count: int = 5
    tick_interval_days: int = 7
    tooltip_width: float = 180
    tooltip_height: float = 72


@dataclass(frozen=True, slots=True)
class DateTick:
    """An x-axis label for a day index."""

    index: int
    iso_date: str


@dataclass(frozen=True, slots=True)
class TooltipPosition:
    """Top-left corner of a tooltip, relative to the plot container."""

    left: float
    top: float


@dataclass(frozen=True, slots=True)
class DashboardSelection:
    """Selection state driving the dashboard.

    Attributes:
        revenue_type: Selected revenue breakdown.
        project_category: Selected project filter.
        stat_key: Key of the stat whose chart is open, or None.
    """

    revenue_type: RevenueType = RevenueType.total
    project_category: ProjectCategory = ProjectCategory.total
    stat_key: str | None = None


@dataclass(frozen=True, slots=True)
class StatCard:
    """Headline figures for a stat card.

    Attributes:
        key: Stable stat key.
        title: Human-friendly title.
        target: Cumulative value reached on the last day.
        display_value: Formatted headline value.
        change: Secondary line (growth, new today, retention).
        unit_label: Unit symbol or suffix.
        unit_name: Long unit name shown above the chart.
    """

    key: str
    title: str
    target: int
    display_value: str
    change: str
    unit_label: str
    unit_name: str


@dataclass(frozen=True, slots=True)
class ReaderQuestion:
    """A frequently asked reader question for a project."""

    id: str
    question: str
    timestamp: str
    file_reference: str
    count: int


@dataclass(frozen=True)
class ChartResult:
    """Everything needed to render one stat's history chart.

    Attributes:
        stat_key: Key of the charted stat.
        unit_label: Unit symbol or suffix used for labels.
        series: Synthesized cumulative series.
        axis: Vertical axis plan.
        points: Series projected into pixel space.
        svg_width: Width of the scrollable SVG canvas.
        line_path: SVG path data connecting `points`.
        date_ticks: X-axis labels.
        y_axis_labels: Formatted y-axis labels, aligned with `axis.tick_values`.
        geometry: Geometry used for the projection.
        epoch: Calendar date of day 1.
    """

    stat_key: str
    unit_label: str
    series: tuple[SeriesPoint, ...]
    axis: AxisPlan
    points: tuple[ProjectedPoint, ...]
    svg_width: float
    line_path: str
    date_ticks: tuple[DateTick, ...]
    y_axis_labels: tuple[str, ...]
    geometry: PlotGeometry
    epoch: date


@dataclass(frozen=True, slots=True)
class HoverDetail:
    """Tooltip content and placement for a hovered point.

    Attributes:
        index: Hovered day index.
        point: Projected point under the pointer.
        iso_date: Calendar date of the hovered day.
        formatted_value: Value with unit applied.
        tooltip: Clamped tooltip position.
    """

    index: int
    point: ProjectedPoint
    iso_date: str
    formatted_value: str
    tooltip: TooltipPosition


@dataclass(frozen=True)
class DashboardResult:
    """Dashboard payload for a selection.

    Attributes:
        selection: Selection the payload was computed for.
        stats: Stat cards, in display order.
        questions: Reader questions sorted by descending count.
        chart: Chart for the selected stat, if any.
    """

    selection: DashboardSelection
    stats: tuple[StatCard, ...]
    questions: tuple[ReaderQuestion, ...] = ()
    chart: ChartResult | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)
