# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""A URL bound to a single GET operation.

``fetch()`` never raises for network problems: transport errors and non-2xx
responses come back as a :class:`FetchResult` carrying a
:class:`~fieldguard.exceptions.FetchError`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlsplit

import anyio
import httpx

from ..exceptions import ConfigurationError, FetchError
from ..telemetry.metrics import fetch_latency_ms

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class FetchResult:
    text: Optional[str] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the response text, or raise the carried error."""

        if self.error is not None:
            raise self.error
        return self.text or ""


class GetEndpoint:
    def __init__(self, url: str, *, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"Invalid URL for GET endpoint: {url!r}")
        self.url = url
        self.timeout = timeout

    async def fetch(self) -> FetchResult:
        started_at = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as exc:
            logger.warning("GET %s failed: %s", self.url, exc)
            self._record(started_at, "error")
            return FetchResult(error=FetchError(f"GET {self.url} failed: {exc}", url=self.url))

        if not 200 <= response.status_code < 300:
            logger.warning("GET %s returned HTTP %s", self.url, response.status_code)
            self._record(started_at, "error")
            return FetchResult(
                error=FetchError(
                    f"GET {self.url} returned HTTP {response.status_code}",
                    url=self.url,
                    status_code=response.status_code,
                )
            )

        self._record(started_at, "ok")
        return FetchResult(text=response.text)

    def fetch_blocking(self, callback: Optional[Callable[[FetchResult], None]] = None) -> FetchResult:
        """Run :meth:`fetch` on a fresh event loop and hand the result to *callback*.

        Must not be called from inside a running event loop; await
        :meth:`fetch` there instead.
        """

        result = anyio.run(self.fetch)
        if callback is not None:
            callback(result)
        return result

    @staticmethod
    def _record(started_at: float, status: str) -> None:
        duration_ms = (time.perf_counter() - started_at) * 1000.0
        fetch_latency_ms.record(duration_ms, {"status": status})

    def __repr__(self) -> str:
        return f"GetEndpoint({self.url!r})"


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "FetchResult", "GetEndpoint"]
