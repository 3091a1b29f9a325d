# autopresenter_django/presenters.py
"""
Django-aware presenters.

- `ModelPresenter`: `Presenter` whose JSON form understands dates, decimals,
  UUIDs and lazy strings (via `DjangoJSONEncoder`).
- `QuerySetPresenter`: lazy view over a queryset of presentable models. It
  yields presenters on iteration and indexing, and wraps queryset methods so
  `{{ order.items.all }}` or `{{ customers.first }}` stay presented.
- `ModelDecorator`: the default registered Decorator. Adds querysets and
  related managers to the core rules.
"""

from __future__ import annotations

import functools
from typing import Any, Iterator

from autopresenter import Decorator, Presentable, Presenter, PresenterJSONEncoder
from django.core.serializers.json import DjangoJSONEncoder
from django.db.models import Model, QuerySet
from django.db.models.manager import BaseManager
from django.utils.functional import LazyObject, empty

__all__ = [
    "ModelDecorator",
    "ModelJSONEncoder",
    "ModelPresenter",
    "QuerySetPresenter",
]

_INTERNAL = frozenset({"_queryset", "_decorator"})


def _is_presentable_model(model: type[Model] | None) -> bool:
    return isinstance(model, type) and issubclass(model, Presentable)


class QuerySetPresenter:
    """Presenting wrapper around a `QuerySet`. No query runs until it is consumed."""

    def __init__(self, queryset: QuerySet, decorator: Decorator) -> None:
        self._queryset = queryset
        self._decorator = decorator

    def raw(self) -> QuerySet:
        return self._queryset

    def __iter__(self) -> Iterator[Any]:
        for obj in self._queryset:
            yield self._decorator.decorate(obj)

    def __len__(self) -> int:
        return len(self._queryset)

    def __bool__(self) -> bool:
        return bool(self._queryset)

    def __getitem__(self, k: Any) -> Any:
        if isinstance(k, slice):
            # Slice a fresh clone: slicing an evaluated queryset returns a list.
            return self._decorator.decorate(self._queryset.all()[k])
        return self._decorator.decorate(self._queryset[k])

    def __getattr__(self, name: str) -> Any:
        if name in _INTERNAL or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        value = getattr(self._queryset, name)
        if not callable(value):
            return self._decorator.decorate(value)

        @functools.wraps(value)
        def method(*args: Any, **kwargs: Any) -> Any:
            return self._decorator.decorate(value(*args, **kwargs))

        # Template engines consult these before calling.
        method.alters_data = getattr(value, "alters_data", False)
        method.do_not_call_in_templates = getattr(value, "do_not_call_in_templates", False)
        return method

    def __repr__(self) -> str:
        return f"<{type(self).__name__} for {self._queryset.model.__name__}>"


class ModelJSONEncoder(PresenterJSONEncoder, DjangoJSONEncoder):
    """`DjangoJSONEncoder` that also serializes presenters and presented querysets."""

    def default(self, o: Any) -> Any:
        if isinstance(o, QuerySetPresenter):
            return list(o)
        return super().default(o)


class ModelPresenter(Presenter):
    """Base presenter for Django models."""

    json_encoder = ModelJSONEncoder


class ModelDecorator(Decorator):
    """Decorator registered by default for Django projects.

    Lazy objects (`request.user`, `csrf_token`) that have not been evaluated
    yet are left alone: type checks on them would force evaluation. Evaluated
    ones are decorated through their wrapped value.
    """

    presenter_class = ModelPresenter

    def is_decoratable(self, value: Any, _seen: set[int] | None = None) -> bool:
        if isinstance(value, LazyObject):
            wrapped = value._wrapped
            return wrapped is not empty and self.is_decoratable(wrapped, _seen)
        if isinstance(value, (QuerySet, BaseManager)):
            return _is_presentable_model(value.model)
        return super().is_decoratable(value, _seen)

    def decorate(self, value: Any, _seen: frozenset[int] = frozenset()) -> Any:
        if isinstance(value, LazyObject):
            wrapped = value._wrapped
            if wrapped is empty or not self.is_decoratable(wrapped):
                return value
            return self.decorate(wrapped, _seen)
        if isinstance(value, QuerySetPresenter):
            return value
        if isinstance(value, BaseManager):
            if not _is_presentable_model(value.model):
                return value
            return QuerySetPresenter(value.all(), self)
        if isinstance(value, QuerySet):
            if not _is_presentable_model(value.model):
                return value
            return QuerySetPresenter(value, self)
        return super().decorate(value, _seen)
