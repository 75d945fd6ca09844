"""Views for the analytics dashboard JSON endpoints."""

from __future__ import annotations

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST
from loguru import logger

from analysis.engine import build_dashboard, chart_for_selection, describe_hover, resolve_hover
from core.charting.config import chart_config_from_settings, plot_geometry_from_settings
from core.charting.payload import dashboard_payload, hover_payload
from core.forms import AnalyticsSelectionForm, ChartPointerForm
from core.hover import clear_hover, load_hover, store_hover


def _form_errors(form: AnalyticsSelectionForm) -> JsonResponse:
    logger.info("Rejected analytics input", errors=form.errors.get_json_data())
    return JsonResponse({"errors": form.errors.get_json_data()}, status=400)


@ensure_csrf_cookie
@require_GET
def analytics_dashboard(request: HttpRequest) -> JsonResponse:
    """Return stat cards, reader questions and the open chart for a selection.

    Query parameters: `revenue_type`, `project_category` and optionally `stat`.
    A hover stored for a different selection is dropped.
    """

    form = AnalyticsSelectionForm(request.GET)
    if not form.is_valid():
        return _form_errors(form)

    selection = form.selection()
    config = chart_config_from_settings()
    result = build_dashboard(selection, geometry=plot_geometry_from_settings(), config=config)

    hover_detail = None
    if result.chart is not None:
        hover_detail = describe_hover(result.chart, load_hover(request, selection), config=config)
    else:
        clear_hover(request)
    return JsonResponse(dashboard_payload(result, hover=hover_detail))


@require_POST
def analytics_hover(request: HttpRequest) -> JsonResponse:
    """Map a pointer-move event to the hovered day and its tooltip.

    Form fields: the selection (`revenue_type`, `project_category`, `stat`),
    `pointer_x` and `rendered_width`. Pointers that cannot be mapped keep the
    previously stored hover.
    """

    form = ChartPointerForm(request.POST)
    if not form.is_valid():
        return _form_errors(form)

    selection = form.selection()
    config = chart_config_from_settings()
    chart = chart_for_selection(selection, geometry=plot_geometry_from_settings(), config=config)
    if chart is None:
        clear_hover(request)
        return JsonResponse({"hover": None})

    hover = resolve_hover(
        chart,
        pointer_x=form.cleaned_data["pointer_x"],
        rendered_width=form.cleaned_data["rendered_width"],
        previous=load_hover(request, selection),
    )
    store_hover(request, selection, hover)
    detail = describe_hover(chart, hover, config=config)
    logger.debug("Resolved chart hover", stat=selection.stat_key, index=hover.index if hover else None)
    return JsonResponse({"hover": hover_payload(detail) if detail is not None else None})


@require_POST
def analytics_hover_clear(request: HttpRequest) -> JsonResponse:
    """Clear the hover when the pointer leaves the plot."""

    clear_hover(request)
    return JsonResponse({"hover": None})
