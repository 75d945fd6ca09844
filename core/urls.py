"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("analytics/", views.analytics_dashboard, name="analytics_dashboard"),
    path("analytics/hover/", views.analytics_hover, name="analytics_hover"),
    path("analytics/hover/clear/", views.analytics_hover_clear, name="analytics_hover_clear"),
]
