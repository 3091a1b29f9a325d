# autopresenter_django/templatetags/presenter_tags.py
"""
Template filters for explicit presentation.

    {% load presenter_tags %}
    {{ customer|present }}          {# wrap with the registered decorator #}
    {{ customer|raw }}              {# unwrap a presenter back to its model #}
    {{ customer|raw:"first_name" }} {# attribute without presentation #}
"""

from typing import Any

from autopresenter import Presenter
from django import template

from ..presenters import QuerySetPresenter
from ..registry import get_decorator

register = template.Library()


@register.filter(name="present")
def present(value: Any) -> Any:
    """Decorate a value with the registered decorator."""
    return get_decorator().decorate(value)


@register.filter(name="raw")
def raw(value: Any, key: str | None = None) -> Any:
    """Return the unpresented model (or attribute) behind a presenter."""
    if isinstance(value, Presenter):
        return value.raw(key)
    if isinstance(value, QuerySetPresenter):
        value = value.raw()
    if key is None:
        return value
    return getattr(value, key)
