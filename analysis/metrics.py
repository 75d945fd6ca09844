"""Stat registry and headline figures for the analytics dashboard.

This module centralizes the stats shown on the dashboard, their units, axis
ceilings and history shapes, so the UI and the chart pipeline agree on them.
"""

from __future__ import annotations

from typing import Final

from .categories import ProjectCategory, RevenueType
from .dto import DashboardSelection, ReaderQuestion, ShapeConfig, StatCard, StatDefinition
from .rounding import round_half_up
from .units import format_number, format_unit_value, is_prefix_unit

BASE_MONTH_GROWTH_PERCENT = 12
BASE_TODAY_NEW = 54
BASE_RETENTION_PERCENT = 92

STATS: Final[dict[str, StatDefinition]] = {
    "revenue": StatDefinition(
        key="revenue",
        title="Total revenue",
        base_target=22450,
        unit_label="￥",
        unit_name="CNY",
        axis_max=25000,
        shape=ShapeConfig(
            daily_base=280,
            daily_wave=160,
            weekly_bonus=2300,
            daily_drift=2,
            segment_multipliers=(0.6, 1.35, 0.85, 1.5, 1.05),
        ),
        scales_with_revenue_type=True,
    ),
    "total_subscriptions": StatDefinition(
        key="total_subscriptions",
        title="Total subscriptions",
        base_target=3200,
        unit_label="人",
        unit_name="subscribers",
        axis_max=4000,
        shape=ShapeConfig(
            daily_base=36,
            daily_wave=18,
            weekly_bonus=260,
            daily_drift=0.7,
            segment_multipliers=(0.7, 1.25, 0.9, 1.2, 0.95),
        ),
    ),
    "active_subscriptions": StatDefinition(
        key="active_subscriptions",
        title="Active subscriptions",
        base_target=850,
        unit_label="人",
        unit_name="subscribers",
        axis_max=1000,
        shape=ShapeConfig(
            daily_base=8,
            daily_wave=5,
            weekly_bonus=60,
            daily_drift=0.1,
            segment_multipliers=(0.8, 1.2, 0.9, 1.15, 0.85),
        ),
    ),
}

READER_QUESTIONS: Final[dict[ProjectCategory, tuple[ReaderQuestion, ...]]] = {
    ProjectCategory.digital_renaissance: (
        ReaderQuestion(
            id="dr_q1",
            question='What exactly do you mean by "rented land" in the Manifesto chapter?',
            timestamp="Asked 10 minutes ago",
            file_reference="Manifesto.txt",
            count=142,
        ),
        ReaderQuestion(
            id="dr_q2",
            question='Can you explain the difference between "consistency" and "intensity"?',
            timestamp="Asked 1 day ago",
            file_reference="01. Core ideas",
            count=56,
        ),
        ReaderQuestion(
            id="dr_q3",
            question="Which tools do you recommend for building a newsletter?",
            timestamp="Asked 5 hours ago",
            file_reference="02. Practical guide",
            count=31,
        ),
    ),
    ProjectCategory.minimalist_living: (
        ReaderQuestion(
            id="ml_q1",
            question="What is the first step towards minimalist living?",
            timestamp="Asked 20 minutes ago",
            file_reference="Minimalist living primer",
            count=95,
        ),
        ReaderQuestion(
            id="ml_q2",
            question="How should I plan a 30-day declutter?",
            timestamp="Asked 3 hours ago",
            file_reference="Decluttering roadmap",
            count=67,
        ),
        ReaderQuestion(
            id="ml_q3",
            question='What do you suggest for a "digital detox"?',
            timestamp="Asked 1 day ago",
            file_reference="Digital detox guide",
            count=48,
        ),
    ),
}


def list_stat_definitions() -> tuple[StatDefinition, ...]:
    """Return the dashboard stats in display order."""

    return tuple(STATS.values())


def get_stat_definition(stat_key: str) -> StatDefinition | None:
    """Return the StatDefinition for a key, or None when unknown."""

    return STATS.get(stat_key)


def stat_target(stat: StatDefinition, *, revenue_type: RevenueType, project_category: ProjectCategory) -> int:
    """Return the current total of a stat for a selection.

    Args:
        stat: Stat to scale.
        revenue_type: Selected revenue breakdown; only applies to revenue stats.
        project_category: Selected project filter.

    Returns:
        `round(base_target * multipliers)`.
    """

    value = stat.base_target
    if stat.scales_with_revenue_type:
        value *= revenue_type.multiplier
    return round_half_up(value * project_category.multiplier)


def month_growth_percent(*, revenue_type: RevenueType, project_category: ProjectCategory) -> int:
    """Return this month's revenue growth, floored at 2%."""

    return max(
        2,
        round_half_up(BASE_MONTH_GROWTH_PERCENT * revenue_type.multiplier * project_category.multiplier),
    )


def today_new_subscribers(*, project_category: ProjectCategory) -> int:
    """Return subscribers gained today, floored at 6."""

    return max(6, round_half_up(BASE_TODAY_NEW * project_category.multiplier))


def retention_percent(*, project_category: ProjectCategory) -> int:
    """Return the retention rate, kept within 78..99%."""

    return min(99, max(78, round_half_up(BASE_RETENTION_PERCENT - (1 - project_category.multiplier) * 8)))


def build_stat_cards(selection: DashboardSelection) -> tuple[StatCard, ...]:
    """Build headline cards for every stat.

    Args:
        selection: Current dashboard selection.

    Returns:
        StatCard entries in display order.
    """

    revenue_type = selection.revenue_type
    project_category = selection.project_category
    changes = {
        "revenue": (
            f"Up {month_growth_percent(revenue_type=revenue_type, project_category=project_category)}% this month"
        ),
        "total_subscriptions": f"{today_new_subscribers(project_category=project_category)} new today",
        "active_subscriptions": f"Retention {retention_percent(project_category=project_category)}%",
    }

    cards: list[StatCard] = []
    for stat in list_stat_definitions():
        target = stat_target(stat, revenue_type=revenue_type, project_category=project_category)
        if is_prefix_unit(stat.unit_label):
            display_value = format_unit_value(target, unit_label=stat.unit_label)
        else:
            display_value = format_number(target, grouped=True)
        cards.append(
            StatCard(
                key=stat.key,
                title=stat.title,
                target=target,
                display_value=display_value,
                change=changes.get(stat.key, ""),
                unit_label=stat.unit_label,
                unit_name=stat.unit_name,
            )
        )
    return tuple(cards)


def reader_questions_for(project_category: ProjectCategory) -> tuple[ReaderQuestion, ...]:
    """Return reader questions for a project, most asked first.

    The `total` category merges the questions of every project.
    """

    if project_category is ProjectCategory.total:
        questions = [question for group in READER_QUESTIONS.values() for question in group]
    else:
        questions = list(READER_QUESTIONS.get(project_category, ()))
    return tuple(sorted(questions, key=lambda question: question.count, reverse=True))
