"""Client-side job constants cache backed by the constants HTTP API.

Used by client runtimes (frontend BFFs, workers, other services) that read
constants over HTTP instead of from the database. Holds one composite slot
with a single timestamp: the client always wants the whole payload, and its
TTL window starts at its own fetch time, independent of the server cache.
"""

import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx

from app.core.config import Settings, get_settings
from app.core.constants import CACHE_TTL_SECONDS, CONSTANTS_ENDPOINT
from app.domain.fallback_options import fallback_job_constants
from app.domain.value_objects import JobConstants, Option
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class ConstantsAPIError(Exception):
    """Raised internally when the constants API response is unusable."""


class JobConstantsClient:
    """Fetch and cache the constants payload from GET /api/constants.

    Failures (network, non-2xx, success=false, malformed body) yield the
    shared curated fallback and are not cached, so the next call retries.
    """

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
        endpoint: str = CONSTANTS_ENDPOINT,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.endpoint = endpoint
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.timeout_seconds = timeout_seconds
        self._shared_http = http_client
        self._data: JobConstants | None = None
        self._timestamp: float | None = None

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, **kwargs: Any
    ) -> "JobConstantsClient":
        """Build a client from CONSTANTS_API_BASE_URL, HTTP_TIMEOUT_SECONDS, and the cache TTL.

        Keyword arguments (http_client, clock, ...) are passed through and
        override the settings-derived values.
        """
        settings = settings or get_settings()
        options: dict[str, Any] = {
            "timeout_seconds": settings.http_timeout_seconds,
            "ttl_seconds": settings.constants_cache_ttl_seconds,
        }
        options.update(kwargs)
        return cls(settings.constants_api_base_url, **options)

    async def __aenter__(self) -> "JobConstantsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Drop the cached payload. A shared HTTP client is left to its owner."""
        self.clear()

    @asynccontextmanager
    async def _http_cm(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield shared HTTP client or a short-lived one."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            yield client

    def _is_cache_valid(self) -> bool:
        if self._data is None or self._timestamp is None:
            return False
        return self.clock() - self._timestamp < self.ttl_seconds

    async def _fetch_from_api(self) -> JobConstants:
        """GET the constants endpoint and parse the payload. Raises on any failure."""
        url = f"{self.base_url}{self.endpoint}"
        async with self._http_cm() as client:
            response = await client.get(url)
        if not response.is_success:
            raise ConstantsAPIError(f"HTTP error! status: {response.status_code}")
        try:
            body: Any = response.json()
        except ValueError as e:
            raise ConstantsAPIError("Response body is not valid JSON") from e
        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            raise ConstantsAPIError(error or "Failed to fetch constants")
        try:
            return JobConstants.from_dict(body.get("data"))
        except ValueError as e:
            raise ConstantsAPIError(str(e)) from e

    async def get_all(self) -> JobConstants:
        """Return the composite payload, from cache when fresh."""
        if self._is_cache_valid() and self._data is not None:
            return self._data
        try:
            data = await self._fetch_from_api()
        except (httpx.HTTPError, ConstantsAPIError) as e:
            logger.warning("Failed to fetch constants from API, using fallback: %s", e)
            return fallback_job_constants()
        self._data = data
        self._timestamp = self.clock()
        return data

    async def get_job_roles(self) -> tuple[Option, ...]:
        return (await self.get_all()).job_roles

    async def get_primary_products(self) -> tuple[Option, ...]:
        return (await self.get_all()).primary_products

    async def get_job_types(self) -> tuple[Option, ...]:
        return (await self.get_all()).job_types

    async def get_countries(self) -> tuple[Option, ...]:
        return (await self.get_all()).countries

    def clear(self) -> None:
        """Evict the composite slot (forced refresh, tests)."""
        self._data = None
        self._timestamp = None
