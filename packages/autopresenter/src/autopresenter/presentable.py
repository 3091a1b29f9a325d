# autopresenter/presentable.py
"""
The "presentable" capability.

A model opts into presentation by inheriting `Presentable`. The mixin is the
marker the Decorator looks for and also supplies plain-object defaults for
the small interface a Presenter delegates to:

- attribute existence (`has_attribute`)
- flat serialization (`to_dict`)
- routing (`get_route_key`, `get_route_key_name`)

Framework integrations override these (see `autopresenter_django.mixins`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .presenter import Presenter

__all__ = ["Presentable", "SupportsPresentation"]


@runtime_checkable
class SupportsPresentation(Protocol):
    """Operations a Presenter forwards to its model (and exposes itself)."""

    def has_attribute(self, key: str) -> bool: ...

    def to_dict(self) -> dict[str, Any]: ...

    def get_route_key(self) -> Any: ...

    def get_route_key_name(self) -> str: ...


class Presentable:
    """Mixin declaring a model as presentable."""

    #: Presenter used for instances of this class; None means "decorator default".
    presenter_class: ClassVar[type[Presenter] | None] = None

    #: Attribute exposed as the routing key.
    route_key_name: ClassVar[str | None] = "id"

    def get_presenter_class(self) -> type[Presenter] | None:
        return self.presenter_class

    def has_attribute(self, key: str) -> bool:
        return hasattr(self, key)

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    def get_route_key_name(self) -> str:
        return self.route_key_name or "id"

    def get_route_key(self) -> Any:
        return getattr(self, self.get_route_key_name())
