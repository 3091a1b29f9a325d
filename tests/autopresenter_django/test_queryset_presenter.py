import json
from decimal import Decimal

import pytest

from autopresenter import Presenter
from autopresenter_django.presenters import ModelDecorator, ModelJSONEncoder, QuerySetPresenter

from .fixtures.dummyapp.models import Customer, LineItem, Order, Tag

pytestmark = pytest.mark.django_db


@pytest.fixture
def order():
    customer = Customer.objects.create(first_name="ada", last_name="lovelace")
    order = Order.objects.create(reference="r-1", customer=customer, total=Decimal("12.50"))
    LineItem.objects.create(order=order, sku="abc", quantity=2)
    LineItem.objects.create(order=order, sku="xyz", quantity=1)
    return order


@pytest.fixture
def decorator():
    return ModelDecorator()


def test_decorating_a_queryset_runs_no_query(order, decorator, django_assert_num_queries):
    with django_assert_num_queries(0):
        presented = decorator.decorate(LineItem.objects.all())
    assert isinstance(presented, QuerySetPresenter)


def test_iteration_and_indexing_yield_presenters(order, decorator):
    presented = decorator.decorate(LineItem.objects.all())
    assert len(presented) == 2
    assert bool(presented) is True
    assert [item.sku for item in presented] == ["abc", "xyz"]
    assert all(isinstance(item, Presenter) for item in presented)
    assert presented[0].raw().sku == "abc"
    assert isinstance(presented[:1], QuerySetPresenter)


def test_queryset_methods_stay_presented(order, decorator):
    presented = decorator.decorate(LineItem.objects.all())
    filtered = presented.filter(sku="xyz")
    assert isinstance(filtered, QuerySetPresenter)
    assert isinstance(presented.first(), Presenter)
    assert presented.count() == 2
    assert not decorator.decorate(LineItem.objects.none())


def test_related_managers_are_presented(order, decorator):
    presented = decorator.decorate(order)
    assert isinstance(presented.items, QuerySetPresenter)
    assert presented.customer.first_name == "Ada"


def test_data_altering_methods_keep_their_flag(order, decorator):
    presented = decorator.decorate(Order.objects.all())
    assert presented.delete.alters_data is True
    assert presented.filter.__name__ == "filter"


def test_templates_refuse_to_call_data_altering_methods(order, presenters_engine):
    out = presenters_engine.from_string("[{{ orders.delete }}]").render({"orders": Order.objects.all()})
    assert out == "[]"
    assert Order.objects.count() == 1


def test_order_template_renders_related_items(order, presenters_engine):
    out = presenters_engine.get_template("order.html").render({"order": order})
    assert out == "r-1: abcx2 xyzx1"


def test_non_presentable_querysets_are_left_alone(decorator):
    queryset = Tag.objects.all()
    assert decorator.is_decoratable(queryset) is False
    assert decorator.decorate(queryset) is queryset


def test_presented_queryset_is_not_wrapped_again(decorator):
    presented = decorator.decorate(Order.objects.all())
    assert decorator.decorate(presented) is presented


def test_json_encoder_serializes_presented_querysets(order, decorator):
    presented = decorator.decorate(LineItem.objects.all())
    payload = json.loads(json.dumps({"items": presented}, cls=ModelJSONEncoder))
    assert [item["sku"] for item in payload["items"]] == ["abc", "xyz"]


def test_slices_stay_lazy_after_evaluation(order, decorator, django_assert_num_queries):
    presented = decorator.decorate(LineItem.objects.all())
    list(presented)
    with django_assert_num_queries(0):
        head = presented[:1]
    assert isinstance(head, QuerySetPresenter)
    assert [item.sku for item in head] == ["abc"]
