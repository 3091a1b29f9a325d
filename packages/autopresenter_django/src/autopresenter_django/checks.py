# packages/autopresenter_django/src/autopresenter_django/checks.py


"""
Django system checks for the AUTOPRESENTER configuration.

- `autopresenter.E001`: `AUTOPRESENTER` does not validate (wrong type, unknown key, bad value).
- `autopresenter.E002`: `AUTOPRESENTER["DECORATOR"]` does not import or is not a Decorator subclass.
- `autopresenter.W001`: no `TEMPLATES` entry uses `PresenterTemplates`, so nothing is
  presented automatically (the `present` filter still works).

These checks run at startup and can be invoked with `python manage.py check`.
"""

from typing import Any, Iterable, List, Optional

from django.conf import settings
from django.core import checks
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .backends import PresenterTemplates
from .registry import load_decorator_class
from .settings import SETTINGS_NAME, get_settings

TAG = "autopresenter"
BACKEND_PATH = "autopresenter_django.backends.PresenterTemplates"


@checks.register(TAG)
def check_autopresenter_settings(app_configs: Optional[Iterable] = None, **kwargs: Any) -> List[checks.CheckMessage]:
    """Validate the AUTOPRESENTER setting and the Decorator it names."""
    try:
        conf = get_settings()
    except ImproperlyConfigured as exc:
        return [
            checks.Error(
                str(exc),
                hint=f"{SETTINGS_NAME} accepts DECORATOR (str), ENABLED (bool) and EXCLUDE (list of str).",
                id="autopresenter.E001",
            )
        ]

    try:
        load_decorator_class(conf.decorator)
    except ImproperlyConfigured as exc:
        return [
            checks.Error(
                str(exc),
                hint="Point DECORATOR at a subclass of autopresenter.Decorator.",
                id="autopresenter.E002",
            )
        ]
    return []


def _uses_presenter_backend(backend: Any) -> bool:
    if backend == BACKEND_PATH:
        return True
    if not isinstance(backend, str):
        return False
    try:
        cls = import_string(backend)
    except ImportError:
        return False
    return isinstance(cls, type) and issubclass(cls, PresenterTemplates)


@checks.register(TAG, checks.Tags.templates)
def check_template_backend(app_configs: Optional[Iterable] = None, **kwargs: Any) -> List[checks.CheckMessage]:
    """Warn when no template engine presents variables automatically."""
    templates = getattr(settings, "TEMPLATES", None) or []
    if any(_uses_presenter_backend(conf.get("BACKEND")) for conf in templates if isinstance(conf, dict)):
        return []
    return [
        checks.Warning(
            "No TEMPLATES entry uses the presenting backend; template variables are not decorated automatically.",
            hint=f"Set BACKEND to {BACKEND_PATH!r}, or decorate values with the |present filter.",
            id="autopresenter.W001",
        )
    ]
