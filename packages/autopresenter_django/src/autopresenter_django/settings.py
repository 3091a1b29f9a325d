# packages/autopresenter_django/src/autopresenter_django/settings.py


"""
Package-level configuration for `autopresenter_django`.

This is **not** your project's Django `settings.py`. It reads the project's
`AUTOPRESENTER` dict and validates it, falling back to internal defaults:

    AUTOPRESENTER = {
        "DECORATOR": "autopresenter_django.presenters.ModelDecorator",
        "ENABLED": True,
        "EXCLUDE": ["request", "csrf_token"],
    }

Keys:
- DECORATOR: str
    Import path of the Decorator class registered at startup.
- ENABLED: bool
    When False the template backend renders without decorating anything.
- EXCLUDE: Iterable[str]
    Context variable names that are never decorated.

Settings are read on every call so `override_settings` works in tests.
"""

from typing import Any

from django.conf import settings as dj_settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

SETTINGS_NAME = "AUTOPRESENTER"
DEFAULT_DECORATOR = "autopresenter_django.presenters.ModelDecorator"


class AutoPresenterSettings(BaseModel):
    """Validated shape of the `AUTOPRESENTER` setting."""

    # Accept both DECORATOR (Django-style) and decorator (field name).
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    decorator: str = Field(DEFAULT_DECORATOR, alias="DECORATOR", min_length=1)
    enabled: bool = Field(True, alias="ENABLED")
    exclude: frozenset[str] = Field(frozenset(), alias="EXCLUDE")

    @field_validator("exclude", mode="before")
    @classmethod
    def _coerce_exclude(cls, value: Any) -> Any:
        # A single string is a comma/space separated list, as elsewhere in settings.
        if isinstance(value, str):
            return frozenset(p for p in value.replace(",", " ").split() if p)
        return value


def get_raw_settings() -> Any:
    """Return the project's `AUTOPRESENTER` value, or an empty dict."""
    value = getattr(dj_settings, SETTINGS_NAME, None)
    return {} if value is None else value


def get_settings() -> AutoPresenterSettings:
    """Validate and return the current `AUTOPRESENTER` settings.

    Raises:
        ImproperlyConfigured: the setting is not a dict or fails validation.
    """
    raw = get_raw_settings()
    try:
        return AutoPresenterSettings.model_validate(raw)
    except ValidationError as exc:
        raise ImproperlyConfigured(f"Invalid {SETTINGS_NAME} setting: {exc}") from exc


__all__ = [
    "AutoPresenterSettings",
    "DEFAULT_DECORATOR",
    "SETTINGS_NAME",
    "get_raw_settings",
    "get_settings",
]
