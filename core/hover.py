"""Session storage for the chart hover state.

The hover index only means something for the series it was computed against,
so it is stored together with the selection that produced that series. Reading
it back under any other selection yields no hover.
"""

from __future__ import annotations

from typing import Final

from django.http import HttpRequest

from analysis.dto import DashboardSelection, HoverState

HOVER_SESSION_KEY: Final[str] = "cs_chart_hover"


def _selection_key(selection: DashboardSelection) -> list[str | None]:
    return [selection.revenue_type.value, selection.project_category.value, selection.stat_key]


def load_hover(request: HttpRequest, selection: DashboardSelection) -> HoverState | None:
    """Return the stored hover for a selection.

    A hover stored for a different selection is discarded.

    Args:
        request: Incoming request carrying the session.
        selection: Selection the caller is rendering.

    Returns:
        HoverState, or None when nothing is hovered for this selection.
    """

    stored = request.session.get(HOVER_SESSION_KEY)
    if not isinstance(stored, dict):
        return None
    if stored.get("selection") != _selection_key(selection):
        clear_hover(request)
        return None
    index = stored.get("index")
    if not isinstance(index, int):
        return None
    return HoverState(index=index)


def store_hover(request: HttpRequest, selection: DashboardSelection, hover: HoverState | None) -> None:
    """Persist the hover for a selection in the session.

    Args:
        request: Incoming request whose session will be updated.
        selection: Selection the hover was computed against.
        hover: Hover to store; None clears it.
    """

    if hover is None:
        clear_hover(request)
        return
    request.session[HOVER_SESSION_KEY] = {"selection": _selection_key(selection), "index": hover.index}
    request.session.modified = True


def clear_hover(request: HttpRequest) -> None:
    """Remove any stored hover from the session."""

    if HOVER_SESSION_KEY in request.session:
        del request.session[HOVER_SESSION_KEY]
        request.session.modified = True
