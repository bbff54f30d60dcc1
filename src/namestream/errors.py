"""Exceptions raised by the names client."""

from __future__ import annotations


class NamesError(Exception):
    """Base class for names client errors."""


class EmptyResponseError(NamesError):
    """The names service answered, but the batch held no names."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"retrieve names from {url} failed, no names returned")


class UnknownCategoryError(NamesError, ValueError):
    """Requested category is not one of the known name kinds."""

    def __init__(self, category: object) -> None:
        self.category = category
        super().__init__(f"Unknown names category: {category!r}")
