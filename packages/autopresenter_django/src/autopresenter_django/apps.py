# autopresenter_django/apps.py
"""
autopresenter_django.apps
=========================

AppConfig for the `autopresenter_django` integration.

Responsibilities
----------------
- Register the process-wide Decorator (built from `AUTOPRESENTER["DECORATOR"]`).
- Drop and rebuild it when the `AUTOPRESENTER` setting changes.
- Register the package's system checks.

Notes
-----
- Set `DJANGO_SKIP_READY=1` to skip startup work (tooling, one-off scripts);
  the Decorator is then built lazily on first use.
"""

import logging
import os

from django.apps import AppConfig
from django.test.signals import setting_changed

from autopresenter.tracing import service_span_sync

logger = logging.getLogger(__name__)


class AutoPresenterConfig(AppConfig):
    """Django AppConfig for autopresenter_django."""

    name = "autopresenter_django"
    verbose_name = "Auto presenter"

    def ready(self) -> None:
        """Connect receivers, register checks and build the Decorator."""
        if os.environ.get("DJANGO_SKIP_READY") == "1":
            return

        from . import checks  # noqa: F401  (registers system checks)
        from .registry import get_decorator, on_setting_changed

        setting_changed.connect(on_setting_changed, dispatch_uid="autopresenter.setting_changed")

        with service_span_sync("autopresenter.django_app.ready"):
            decorator = get_decorator()
            logger.info("autopresenter ready with %s", type(decorator).__name__)
