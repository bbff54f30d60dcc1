"""Name categories and their endpoints on the names service."""

from __future__ import annotations

from enum import Enum

DEFAULT_BASE_URL = "http://code.503web.com/names"


class Category(str, Enum):
    """Kinds of generated names."""

    PERSON = "person"
    PRODUCT = "product"
    ADDRESS = "address"
    FIRM = "firm"
    FILL = "fill"  # generic filler text

    @property
    def endpoint(self) -> str:
        """Path suffix of this category on the names service."""
        return _ENDPOINTS[self]


_ENDPOINTS: dict[Category, str] = {
    Category.PERSON: "name",
    Category.PRODUCT: "product",
    Category.ADDRESS: "address",
    Category.FIRM: "firm",
    Category.FILL: "fill",
}


def category_url(base_url: str, category: Category) -> str:
    """Build the full service URL for a category."""
    return f"{base_url.rstrip('/')}/{category.endpoint}"
