"""Chart settings loaded from Django configuration."""

from __future__ import annotations

from datetime import date
from typing import Any

from django.conf import settings

from analysis.dto import ChartConfig, PlotGeometry
from analysis.errors import ChartGeometryError


def _chart_settings() -> dict[str, Any]:
    return dict(getattr(settings, "ANALYTICS_CHART", {}) or {})


def plot_geometry_from_settings() -> PlotGeometry:
    """Build PlotGeometry from `settings.ANALYTICS_CHART`.

    Returns:
        PlotGeometry with defaults for any missing key.

    Raises:
        ChartGeometryError: When the configured geometry leaves no drawable area.
    """

    raw = _chart_settings()
    defaults = PlotGeometry()
    geometry = PlotGeometry(
        min_width=float(raw.get("min_width", defaults.min_width)),
        height=float(raw.get("height", defaults.height)),
        padding_left=float(raw.get("padding_left", defaults.padding_left)),
        padding_right=float(raw.get("padding_right", defaults.padding_right)),
        padding_top=float(raw.get("padding_top", defaults.padding_top)),
        padding_bottom=float(raw.get("padding_bottom", defaults.padding_bottom)),
        min_step=float(raw.get("min_step", defaults.min_step)),
    )
    validate_plot_geometry(geometry)
    return geometry


def validate_plot_geometry(geometry: PlotGeometry) -> None:
    """Reject geometry that cannot hold a plot.

    Args:
        geometry: Geometry to check.

    Raises:
        ChartGeometryError: On the first violated constraint.
    """

    if geometry.min_step <= 0:
        raise ChartGeometryError(field="min_step", value=geometry.min_step, reason="must be positive")
    if geometry.plot_height <= 0:
        raise ChartGeometryError(field="height", value=geometry.height, reason="must exceed vertical padding")
    if geometry.min_width <= geometry.padding_left + geometry.padding_right:
        raise ChartGeometryError(field="min_width", value=geometry.min_width, reason="must exceed horizontal padding")


def chart_config_from_settings() -> ChartConfig:
    """Build ChartConfig from `settings.ANALYTICS_CHART`.

    Returns:
        ChartConfig with defaults for any missing key.

    Raises:
        ChartGeometryError: When a tick or history setting is out of range.
        ValueError: When the epoch is not a `YYYY-MM-DD` date.
    """

    raw = _chart_settings()
    defaults = ChartConfig()
    epoch = raw.get("epoch", defaults.epoch)
    if isinstance(epoch, str):
        epoch = date.fromisoformat(epoch.strip())

    config = ChartConfig(
        history_length=int(raw.get("history_length", defaults.history_length)),
        epoch=epoch,
        tick_count=int(raw.get("tick_count", defaults.tick_count)),
        tick_interval_days=int(raw.get("tick_interval_days", defaults.tick_interval_days)),
        tooltip_width=float(raw.get("tooltip_width", defaults.tooltip_width)),
        tooltip_height=float(raw.get("tooltip_height", defaults.tooltip_height)),
    )
    if config.history_length < 1:
        raise ChartGeometryError(field="history_length", value=config.history_length, reason="must be at least 1")
    if config.tick_count < 2:
        raise ChartGeometryError(field="tick_count", value=config.tick_count, reason="at least 2 ticks are required")
    if config.tick_interval_days < 1:
        raise ChartGeometryError(
            field="tick_interval_days",
            value=config.tick_interval_days,
            reason="must be at least 1",
        )
    return config
