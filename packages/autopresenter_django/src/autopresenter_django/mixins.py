# autopresenter_django/mixins.py
from typing import Any, ClassVar

from autopresenter import Presentable


class PresentableModelMixin(Presentable):
    """Presentable capability for Django models.

    Usage:
        class Customer(PresentableModelMixin, models.Model):
            presenter_class = CustomerPresenter
            route_key_name = "slug"
    """

    #: Attribute used as the routing key; None means the primary key.
    route_key_name: ClassVar[str | None] = None

    def to_dict(self) -> dict[str, Any]:
        """Concrete field values keyed by attname (`customer_id`, not `customer`)."""
        return {field.attname: field.value_from_object(self) for field in self._meta.concrete_fields}

    def get_route_key_name(self) -> str:
        return self.route_key_name or self._meta.pk.attname
