import pytest


# Reset the registered decorator between tests to avoid cross-test bleed
@pytest.fixture(autouse=True)
def reset_registered_decorator():
    from autopresenter_django.registry import reset_decorator

    reset_decorator()
    yield
    reset_decorator()


@pytest.fixture
def presenters_engine():
    from django.template import engines

    return engines["presenters"]


@pytest.fixture
def plain_engine():
    from django.template import engines

    return engines["plain"]


@pytest.fixture
def customer():
    from tests.autopresenter_django.fixtures.dummyapp.models import Customer

    return Customer(id=1, first_name="ada", last_name="lovelace")
