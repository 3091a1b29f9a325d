# autopresenter/presenter.py
"""
autopresenter.presenter
=======================

`Presenter` wraps one presentable model and stands in for it in view code.

Reading an attribute off a presenter resolves in this order:

1. Read the raw attribute from the model (errors propagate unchanged).
2. If the raw value is itself decoratable (a presentable model, or a
   container holding some), return it decorated so nested model graphs are
   presented too.
3. Otherwise look for a presentation function registered for the key, trying
   the exact name, then snake_case, then camelCase.
4. Call it with the raw value, or return the raw value when none exists.

Presentation functions are declared with `@presents` and collected once per
class when the subclass is created:

    class UserPresenter(Presenter):
        @presents
        def name(self, value):
            return value.title()

        @presents("joinedAt")
        def joined(self, value):
            return value.strftime("%d %b %Y")

        @property
        def full_name(self):
            return f"{self.name} {self.last_name}"

Values the model does not have are plain properties on the presenter; they
are found before any forwarding happens. Anything the presenter does not
define is forwarded to the model, so model methods can be called through it
with the same arguments and results.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from .encoders import PresenterJSONEncoder
from .presentable import Presentable
from .utils import name_candidates

if TYPE_CHECKING:
    from .decorator import Decorator

__all__ = ["Presenter", "PresentedAttribute", "presents"]

PresentationFunc = Callable[["Presenter", Any], Any]

_PRESENTS_ATTR = "__presents__"
_INTERNAL = frozenset({"_model", "_decorator"})


def presents(*keys: Any) -> Any:
    """Register a method as the presentation of one or more model attributes.

    Used bare (`@presents`) the method presents the attribute sharing its name.
    With arguments (`@presents("fullName")`) it presents each given key.
    """
    if len(keys) == 1 and callable(keys[0]):
        func = keys[0]
        setattr(func, _PRESENTS_ATTR, (func.__name__,))
        return func

    for key in keys:
        if not isinstance(key, str) or not key:
            raise TypeError(f"presents() keys must be non-empty strings; got {key!r}")

    def decorator(func: PresentationFunc) -> PresentationFunc:
        setattr(func, _PRESENTS_ATTR, tuple(keys) or (func.__name__,))
        return func

    return decorator


class PresentedAttribute:
    """Class-level stand-in for a presentation function named after its attribute.

    Without it, `presenter.name` would return the bound `name` method instead
    of the presented value.
    """

    def __init__(self, name: str, func: PresentationFunc) -> None:
        self.name = name
        self.func = func
        self.__doc__ = func.__doc__

    def __get__(self, instance: Presenter | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._present(self.name)

    def __repr__(self) -> str:
        return f"<PresentedAttribute {self.name!r}>"


class Presenter:
    """Wraps a presentable model and applies per-attribute presentation."""

    json_encoder: ClassVar[type[json.JSONEncoder]] = PresenterJSONEncoder

    _presenters: ClassVar[dict[str, PresentationFunc]] = {}

    def __init__(self, model: Presentable, decorator: Decorator) -> None:
        self._model = model
        self._decorator = decorator

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        table: dict[str, PresentationFunc] = {}
        for base in reversed(cls.__mro__[1:]):
            table.update(vars(base).get("_presenters", {}))

        for attr, value in list(vars(cls).items()):
            keys = getattr(value, _PRESENTS_ATTR, None)
            if not keys:
                continue
            for key in keys:
                table[key] = value
            if any(attr in name_candidates(key) for key in keys):
                setattr(cls, attr, PresentedAttribute(attr, value))

        cls._presenters = table

    # ---- raw access ----
    def raw(self, key: str | None = None) -> Any:
        """Return the wrapped model, or one of its attributes without presentation."""
        if key is None:
            return self._model
        return getattr(self._model, key)

    # ---- presentation ----
    @classmethod
    def get_presentation(cls, key: str) -> PresentationFunc | None:
        """Return the presentation function for `key` (exact, snake, camel), if any."""
        for name in name_candidates(key):
            func = cls._presenters.get(name)
            if func is not None:
                return func
        return None

    def _present(self, key: str) -> Any:
        return self._present_value(key, getattr(self._model, key))

    def _present_value(self, key: str, value: Any) -> Any:
        if self._decorator.is_decoratable(value):
            return self._decorator.decorate(value)
        func = self.get_presentation(key)
        if func is None:
            return value
        return func(self, value)

    def __getattr__(self, key: str) -> Any:
        # Dunders (copy/pickle probes) and our own slots never reach the model.
        if key in _INTERNAL or (key.startswith("__") and key.endswith("__")):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {key!r}")
        return self._present(key)

    # ---- delegated model interface ----
    def has_attribute(self, key: str) -> bool:
        return self._model.has_attribute(key)

    def to_dict(self) -> dict[str, Any]:
        return {key: self._present_value(key, value) for key, value in self._model.to_dict().items()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), cls=self.json_encoder)

    def get_route_key(self) -> Any:
        return self._model.get_route_key()

    def get_route_key_name(self) -> str:
        return self._model.get_route_key_name()

    # ---- dunders ----
    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} for {self._model!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Presenter):
            return NotImplemented
        return type(self) is type(other) and self._model == other._model

    def __hash__(self) -> int:
        try:
            return hash(self._model)
        except TypeError:
            # Unsaved Django rows refuse to hash; they compare by identity.
            return id(self._model)
