"""Configuration loading and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from namestream.categories import DEFAULT_BASE_URL
from namestream.pump import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class Config:
    """Client configuration. Defaults are built in; environment variables override them."""

    names_base_url: str = DEFAULT_BASE_URL
    fetch_timeout_seconds: float = DEFAULT_TIMEOUT


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(
            f"NAMES_FETCH_TIMEOUT_SECONDS must be a number, got {raw!r}"
        ) from None
    if timeout <= 0:
        raise ValueError(f"NAMES_FETCH_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def load_config(env_path: str | Path | None = None) -> Config:
    """Load configuration from environment variables.

    Loads a .env file if present (for local development). Raises ValueError
    if the fetch timeout is not a positive number.
    """
    load_dotenv(dotenv_path=env_path)

    raw_timeout = os.environ.get("NAMES_FETCH_TIMEOUT_SECONDS")
    return Config(
        names_base_url=os.environ.get("NAMES_BASE_URL", Config.names_base_url),
        fetch_timeout_seconds=(
            Config.fetch_timeout_seconds if raw_timeout is None else _parse_timeout(raw_timeout)
        ),
    )
