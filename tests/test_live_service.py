"""End-to-end checks against the real names service.

Skipped unless NAMESTREAM_LIVE_TESTS=1.
"""

from __future__ import annotations

import os

import pytest

from namestream.categories import Category
from namestream.config import Config
from namestream.registry import build_registry

pytestmark = pytest.mark.skipif(
    os.environ.get("NAMESTREAM_LIVE_TESTS") != "1",
    reason="set NAMESTREAM_LIVE_TESTS=1 to hit the live names service",
)

_DRAWS = 1002  # crosses a batch boundary


@pytest.fixture(scope="module")
def registry():
    return build_registry(Config())


@pytest.mark.parametrize(
    "category", [Category.PERSON, Category.PRODUCT, Category.ADDRESS, Category.FIRM]
)
def test_draws_across_refill(registry, category):
    names = [registry.next(category) for _ in range(_DRAWS)]
    assert len(names) == _DRAWS
    assert sum(1 for n in names if n == "") < 50
