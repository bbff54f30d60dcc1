"""Client for the random names service — buffered, thread-safe name streams.

Typical use::

    from namestream import build_registry, load_config

    names = build_registry(load_config())
    names.next_person()
"""

from namestream.categories import DEFAULT_BASE_URL, Category, category_url
from namestream.config import Config, load_config
from namestream.errors import EmptyResponseError, NamesError, UnknownCategoryError
from namestream.pump import BATCH_SIZE, BufferedPump, parse_batch
from namestream.registry import PumpRegistry, build_registry

__all__ = [
    "BATCH_SIZE",
    "BufferedPump",
    "Category",
    "DEFAULT_BASE_URL",
    "Config",
    "EmptyResponseError",
    "NamesError",
    "PumpRegistry",
    "UnknownCategoryError",
    "build_registry",
    "category_url",
    "load_config",
    "parse_batch",
]
