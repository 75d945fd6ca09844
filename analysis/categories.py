"""Dashboard selection categories.

Each category resolves to a numeric multiplier applied to the base targets
before synthesis.
"""

from __future__ import annotations

from enum import StrEnum


class RevenueType(StrEnum):
    """Revenue breakdown selectable on the dashboard."""

    total = "total"
    course = "course"
    ai_subscription = "ai_subscription"

    @property
    def multiplier(self) -> float:
        """Return the share of total revenue this type represents."""

        return REVENUE_TYPE_MULTIPLIERS[self]


class ProjectCategory(StrEnum):
    """Project filter selectable on the dashboard."""

    total = "total"
    digital_renaissance = "digital_renaissance"
    minimalist_living = "minimalist_living"

    @property
    def multiplier(self) -> float:
        """Return the share of all projects this category represents."""

        return PROJECT_CATEGORY_MULTIPLIERS[self]


REVENUE_TYPE_MULTIPLIERS: dict[RevenueType, float] = {
    RevenueType.total: 1,
    RevenueType.course: 0.65,
    RevenueType.ai_subscription: 0.35,
}

PROJECT_CATEGORY_MULTIPLIERS: dict[ProjectCategory, float] = {
    ProjectCategory.total: 1,
    ProjectCategory.digital_renaissance: 0.6,
    ProjectCategory.minimalist_living: 0.4,
}

REVENUE_TYPE_LABELS: dict[RevenueType, str] = {
    RevenueType.total: "All revenue",
    RevenueType.course: "Course revenue",
    RevenueType.ai_subscription: "AI subscription revenue",
}

PROJECT_CATEGORY_LABELS: dict[ProjectCategory, str] = {
    ProjectCategory.total: "All projects",
    ProjectCategory.digital_renaissance: "Digital Renaissance",
    ProjectCategory.minimalist_living: "Minimalist Living",
}
