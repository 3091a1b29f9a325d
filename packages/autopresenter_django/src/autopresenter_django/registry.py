# autopresenter_django/registry.py
"""
Process-wide Decorator registration.

The application registers exactly one Decorator, built with no arguments
from the `DECORATOR` import path. Template backends fetch it as a render
starts and pass it explicitly into the render context; nodes never look it up.

Changing `AUTOPRESENTER` (e.g. via `override_settings`) drops the instance so
the next `get_decorator()` builds it from the new settings.
"""

import logging
import threading
from typing import Any

from autopresenter import Decorator
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .settings import SETTINGS_NAME, get_settings

logger = logging.getLogger(__name__)

__all__ = [
    "get_decorator",
    "set_decorator",
    "reset_decorator",
    "load_decorator_class",
    "on_setting_changed",
]

_lock = threading.RLock()
_decorator: Decorator | None = None


def load_decorator_class(path: str) -> type[Decorator]:
    """Import a Decorator subclass from a dotted path.

    Raises:
        ImproperlyConfigured: the path does not import, or does not name a Decorator subclass.
    """
    try:
        obj = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"Could not import {SETTINGS_NAME}['DECORATOR'] {path!r}: {exc}") from exc
    if not isinstance(obj, type) or not issubclass(obj, Decorator):
        raise ImproperlyConfigured(f"{SETTINGS_NAME}['DECORATOR'] {path!r} is not a Decorator subclass; got {obj!r}")
    return obj


def get_decorator() -> Decorator:
    """Return the registered Decorator, building it on first use."""
    global _decorator
    with _lock:
        if _decorator is None:
            path = get_settings().decorator
            _decorator = load_decorator_class(path)()
            logger.info("autopresenter.decorator.registered %s", path)
        return _decorator


def set_decorator(decorator: Decorator) -> None:
    """Register an already-built Decorator instance."""
    global _decorator
    if not isinstance(decorator, Decorator):
        raise TypeError(f"Expected a Decorator instance; got {decorator!r}")
    with _lock:
        _decorator = decorator
    logger.debug("autopresenter.decorator.set %r", decorator)


def reset_decorator() -> None:
    """Forget the registered Decorator; the next lookup rebuilds it."""
    global _decorator
    with _lock:
        _decorator = None


def on_setting_changed(*, setting: str, **kwargs: Any) -> None:
    """`setting_changed` receiver dropping the Decorator when its settings change."""
    if setting == SETTINGS_NAME:
        reset_decorator()
        logger.debug("autopresenter.decorator.reset setting=%s", setting)
