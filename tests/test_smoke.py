"""Minimal smoke tests for project scaffolding."""

from __future__ import annotations

import pytest


@pytest.mark.unit
def test_analysis_engine_imports() -> None:
    """Import the analytics engine and verify the public entry point exists."""

    from analysis import build_dashboard

    assert callable(build_dashboard)


@pytest.mark.unit
def test_analysis_package_does_not_import_django() -> None:
    """The pure analytics modules must stay free of Django imports."""

    from pathlib import Path

    package_dir = Path(__file__).resolve().parent.parent / "analysis"
    for module in package_dir.glob("*.py"):
        source = module.read_text(encoding="utf-8")
        assert "import django" not in source and "from django" not in source, module.name


@pytest.mark.integration
def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "creatorStudio.settings")
    django.setup()
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
