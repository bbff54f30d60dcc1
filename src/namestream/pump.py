"""Buffered name pump — serves names one by one, fetching them in batches."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque

import httpx

from namestream.errors import EmptyResponseError

logger = logging.getLogger(__name__)

BATCH_SIZE = 1000  # names requested from the service per refill
DEFAULT_TIMEOUT = 10.0  # seconds


def parse_batch(body: str) -> list[str]:
    """Split a newline-delimited response body into names.

    A trailing newline ends the last line rather than starting a new one.
    Blank lines inside the body are kept as empty names.
    """
    if not body:
        return []
    names = body.split("\n")
    if body.endswith("\n"):
        names.pop()
    return names


class BufferedPump:
    """Pump out names from a single names service endpoint.

    Names are fetched ``capacity`` at a time and handed out in the order the
    service returned them. Safe to share between threads: every call to
    :meth:`next` holds the pump lock, including while a refill is in flight,
    so each name is returned to exactly one caller.
    """

    def __init__(
        self,
        url: str,
        *,
        capacity: int = BATCH_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._url = url
        self._capacity = capacity
        self._timeout = timeout
        self._pending: deque[str] = deque()
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._pending)

    def __repr__(self) -> str:
        return f"BufferedPump(url={self._url!r}, pending={len(self._pending)})"

    def next(self) -> str:
        """Return the next name, refilling from the service when exhausted.

        Raises whatever the refill raised; the buffer stays empty in that case
        so the following call fetches again. An empty string is a valid name.
        """
        with self._lock:
            if not self._pending:
                self._refill()
            return self._pending.popleft()

    def _refill(self) -> None:
        # Caller must hold self._lock.
        try:
            body = self._fetch()
        except httpx.HTTPError as exc:
            logger.warning("Failed to fetch names from %s: %s", self._url, exc)
            raise

        names = parse_batch(body.decode("utf-8", errors="replace"))
        if not names:
            logger.warning("Names service %s returned an empty batch", self._url)
            raise EmptyResponseError(self._url)

        if len(names) > self._capacity:
            logger.debug(
                "Names service %s returned %d names, more than batch size %d",
                self._url, len(names), self._capacity,
            )
        self._pending = deque(names)
        logger.debug("Fetched %d names from %s", len(names), self._url)

    def _fetch(self) -> bytes:
        """GET the batch. The timeout bounds the whole request, body included."""
        deadline = time.monotonic() + self._timeout
        chunks: list[bytes] = []
        with httpx.stream(
            "GET", self._url, timeout=self._timeout, follow_redirects=True
        ) as resp:
            resp.raise_for_status()
            for chunk in resp.iter_bytes():
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise httpx.ReadTimeout(
                        f"reading {self._url} took longer than {self._timeout}s",
                        request=resp.request,
                    )
        return b"".join(chunks)
