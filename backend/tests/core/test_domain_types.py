"""Domain Types — sort direction parsing and attribute-name normalization."""

import pytest

from user_registry.core.domain_types import SortDirection, UserId, to_attribute_name


@pytest.mark.parametrize("raw", ["asc", "ASC", " Asc "])
def test_parse_ascending(raw):
    assert SortDirection.parse(raw) is SortDirection.ASC


@pytest.mark.parametrize("raw", ["desc", "DESC", "Desc"])
def test_parse_descending(raw):
    assert SortDirection.parse(raw) is SortDirection.DESC


@pytest.mark.parametrize("raw", ["bogus", "", None, "descending"])
def test_parse_unknown_falls_back_to_ascending(raw):
    assert SortDirection.parse(raw) is SortDirection.ASC


def test_user_id_wraps_int():
    assert UserId(7) == 7


@pytest.mark.parametrize("name,expected", [
    ("firstName", "first_name"),
    ("createdAt", "created_at"),
    ("first_name", "first_name"),
    ("id", "id"),
])
def test_to_attribute_name(name, expected):
    assert to_attribute_name(name) == expected
