"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Install the log sinks once Django settings are loaded."""

        from django.conf import settings

        from core.logger import setup_logger

        setup_logger(level=getattr(settings, "LOG_LEVEL", "INFO"))
