# autopresenter/decorator.py
"""
The Decorator: turns presentable values into presenters.

`decorate()` is a pure, total function of its input. It never raises and
keeps no state between calls:

- a `Presentable` becomes a fresh presenter (no caching, no identity map)
- lists, tuples and mappings holding at least one presentable are rebuilt
  with each element decorated
- an existing presenter, and anything else, is returned unchanged

Containers with nothing to present (empty ones included) come back by
identity, so subclasses such as Django's `ErrorList` or `QueryDict` keep
their type and behaviour. A container that contains itself is presented
once; the inner reference is left as is.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .presentable import Presentable
from .presenter import Presenter

__all__ = ["Decorator"]

_CONTAINERS = (Mapping, list, tuple)


def _elements(value: Any) -> Any:
    return value.values() if isinstance(value, Mapping) else value


class Decorator:
    """Stateless registry mapping presentable values to presenters."""

    #: Presenter used when a model does not name its own.
    presenter_class: ClassVar[type[Presenter]] = Presenter

    def is_decoratable(self, value: Any, _seen: set[int] | None = None) -> bool:
        """True for presentable models and containers holding at least one."""
        if isinstance(value, Presentable):
            return True
        if not isinstance(value, _CONTAINERS):
            return False
        seen = set() if _seen is None else _seen
        if id(value) in seen:
            return False
        seen.add(id(value))
        return any(self.is_decoratable(v, seen) for v in _elements(value))

    def decorate(self, value: Any, _seen: frozenset[int] = frozenset()) -> Any:
        if value is None or isinstance(value, Presenter):
            return value
        if isinstance(value, Presentable):
            return self.present(value)
        if not isinstance(value, _CONTAINERS) or id(value) in _seen or not self.is_decoratable(value):
            return value

        # ids of the enclosing containers only, so shared sub-containers are still presented
        seen = _seen | {id(value)}
        if isinstance(value, Mapping):
            return {k: self.decorate(v, seen) for k, v in value.items()}
        if isinstance(value, list):
            return [self.decorate(v, seen) for v in value]
        items = (self.decorate(v, seen) for v in value)
        if hasattr(value, "_make"):  # namedtuple
            return value._make(items)
        return tuple(items)

    def present(self, model: Presentable) -> Presenter:
        """Wrap a single model in its presenter."""
        presenter_cls = model.get_presenter_class() or self.presenter_class
        return presenter_cls(model, self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
