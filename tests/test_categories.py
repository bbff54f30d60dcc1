"""Tests for namestream.categories."""

from __future__ import annotations

import pytest

from namestream.categories import Category, category_url


@pytest.mark.parametrize(
    "category,endpoint",
    [
        (Category.PERSON, "name"),
        (Category.PRODUCT, "product"),
        (Category.ADDRESS, "address"),
        (Category.FIRM, "firm"),
        (Category.FILL, "fill"),
    ],
)
def test_endpoints(category, endpoint):
    assert category.endpoint == endpoint


def test_category_url_joins_base_and_endpoint():
    assert category_url("http://code.503web.com/names", Category.PERSON) == (
        "http://code.503web.com/names/name"
    )


def test_category_url_tolerates_trailing_slash():
    assert category_url("http://code.503web.com/names/", Category.FIRM) == (
        "http://code.503web.com/names/firm"
    )


def test_lookup_by_value():
    assert Category("address") is Category.ADDRESS
