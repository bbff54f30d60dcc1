"""Pump registry — maps name categories to their pumps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from namestream.categories import Category, category_url
from namestream.errors import UnknownCategoryError
from namestream.pump import BATCH_SIZE, BufferedPump

if TYPE_CHECKING:
    from namestream.config import Config


class PumpRegistry:
    """Holds one pump per category and dispatches ``next`` calls to them.

    Build it once at startup (see :func:`build_registry`) and pass it to the
    code that needs names. Pumps never share state, so concurrent callers of
    different categories do not wait on each other.
    """

    def __init__(self) -> None:
        self._pumps: dict[Category, BufferedPump] = {}

    def register(self, category: Category, pump: BufferedPump) -> None:
        """Bind a pump to a category, replacing any previous binding."""
        self._pumps[category] = pump

    def get(self, category: Category | str) -> BufferedPump:
        """Look up the pump for a category. Raises UnknownCategoryError."""
        try:
            key = Category(category)
        except ValueError:
            raise UnknownCategoryError(category) from None
        pump = self._pumps.get(key)
        if pump is None:
            raise UnknownCategoryError(category)
        return pump

    def categories(self) -> list[Category]:
        """Return the registered categories in declaration order."""
        return [c for c in Category if c in self._pumps]

    def next(self, category: Category | str) -> str:
        """Return the next name of a category. Thread safe."""
        return self.get(category).next()

    def next_person(self) -> str:
        return self.next(Category.PERSON)

    def next_product(self) -> str:
        return self.next(Category.PRODUCT)

    def next_address(self) -> str:
        return self.next(Category.ADDRESS)

    def next_firm(self) -> str:
        return self.next(Category.FIRM)

    def next_fill(self) -> str:
        """Return the next piece of generic filler text."""
        return self.next(Category.FILL)


def build_registry(config: Config, *, capacity: int = BATCH_SIZE) -> PumpRegistry:
    """Create a registry with a fresh, empty pump for every category."""
    registry = PumpRegistry()
    for category in Category:
        registry.register(
            category,
            BufferedPump(
                category_url(config.names_base_url, category),
                capacity=capacity,
                timeout=config.fetch_timeout_seconds,
            ),
        )
    return registry
