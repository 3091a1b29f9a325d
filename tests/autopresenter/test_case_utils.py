import pytest

from autopresenter.utils import camel, name_candidates, snake


@pytest.mark.parametrize(
    "name,expected",
    [
        ("fullName", "full_name"),
        ("FullName", "full_name"),
        ("full_name", "full_name"),
        ("HTTPStatus", "http_status"),
        ("name", "name"),
        ("address2Line", "address2_line"),
    ],
)
def test_snake(name, expected):
    assert snake(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("full_name", "fullName"),
        ("first-name", "firstName"),
        ("display name", "displayName"),
        ("fullName", "fullName"),
        ("FullName", "fullName"),
        ("name", "name"),
        ("", ""),
    ],
)
def test_camel(name, expected):
    assert camel(name) == expected


def test_name_candidates_order_is_exact_snake_camel():
    assert name_candidates("DisplayName") == ("DisplayName", "display_name", "displayName")


def test_name_candidates_drops_duplicates_for_single_words():
    assert name_candidates("name") == ("name",)
    assert name_candidates("full_name") == ("full_name", "fullName")
    assert name_candidates("fullName") == ("fullName", "full_name")
