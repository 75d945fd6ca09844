"""Forms validating analytics dashboard input.

Selections arrive as query parameters (dashboard) or form data (pointer
events); both are validated here before reaching the analytics engine.
"""

from __future__ import annotations

from django import forms

from analysis.categories import PROJECT_CATEGORY_LABELS, REVENUE_TYPE_LABELS, ProjectCategory, RevenueType
from analysis.dto import DashboardSelection
from analysis.metrics import list_stat_definitions


def _stat_choices() -> list[tuple[str, str]]:
    return [(stat.key, stat.title) for stat in list_stat_definitions()]


class AnalyticsSelectionForm(forms.Form):
    """Validate the revenue type, project category and open stat."""

    revenue_type = forms.ChoiceField(
        required=False,
        choices=[(value.value, label) for value, label in REVENUE_TYPE_LABELS.items()],
    )
    project_category = forms.ChoiceField(
        required=False,
        choices=[(value.value, label) for value, label in PROJECT_CATEGORY_LABELS.items()],
    )
    stat = forms.ChoiceField(required=False, choices=_stat_choices)

    def selection(self) -> DashboardSelection:
        """Return the validated selection.

        Missing categories default to `total`; a missing stat means no chart
        is open. Must only be called after `is_valid()` returned True.
        """

        revenue_type = self.cleaned_data.get("revenue_type") or RevenueType.total.value
        project_category = self.cleaned_data.get("project_category") or ProjectCategory.total.value
        return DashboardSelection(
            revenue_type=RevenueType(revenue_type),
            project_category=ProjectCategory(project_category),
            stat_key=self.cleaned_data.get("stat") or None,
        )


class ChartPointerForm(AnalyticsSelectionForm):
    """Validate a pointer-move event over the open chart."""

    stat = forms.ChoiceField(choices=_stat_choices)
    pointer_x = forms.FloatField(help_text="Pointer x relative to the plot element's left edge, in CSS pixels.")
    rendered_width = forms.FloatField(
        min_value=0,
        help_text="Rendered width of the plot element, in CSS pixels.",
    )
