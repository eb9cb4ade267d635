"""Process-wide, TTL-gated cache of job constants.

One entry per category, each with its own timestamp. Reads are
read-through: a missing or expired entry is repopulated from the source
(or the curated fallback) before returning. Staleness is checked at read
time only; nothing expires entries in the background.

No locking: concurrent misses on the same category may each query the
source and overwrite the entry; the last write wins.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.application.interfaces.repositories import IDistinctValueSource
from app.application.services.source_fetcher import fetch_options_or_fallback
from app.core.constants import CACHE_TTL_SECONDS
from app.domain.enums import ConstantCategory
from app.domain.value_objects import JobConstants, Option
from app.shared.telemetry.tracing import TracedOperation

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cached data and the clock reading (seconds) at which it was stored."""

    data: T
    timestamp: float

    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        return now - self.timestamp < ttl_seconds


class JobConstantsCache:
    """Read-through cache of option lists keyed by ConstantCategory.

    Constructed once per process (see app.core.lifespan) and handed to
    request handlers via dependencies. The clock is injectable so tests can
    move time past the TTL.
    """

    def __init__(
        self,
        source: IDistinctValueSource,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize an empty cache.

        Args:
            source: Jobs data source used on a miss.
            ttl_seconds: Maximum age at which an entry is still served.
            clock: Returns the current time in seconds.
        """
        self.source = source
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: dict[ConstantCategory, CacheEntry[tuple[Option, ...]]] = {}

    def entry(self, category: ConstantCategory) -> CacheEntry[tuple[Option, ...]] | None:
        """Return the stored entry for category (fresh or not), or None."""
        return self._entries.get(category)

    def clear(self) -> None:
        """Drop every entry; the next read of each category hits the source."""
        self._entries = {}

    async def get(self, category: ConstantCategory) -> tuple[Option, ...]:
        """Return options for category, repopulating when absent or expired."""
        cached = self._entries.get(category)
        if cached is not None and cached.is_fresh(self.clock(), self.ttl_seconds):
            logger.debug("Constants cache HIT: %s", category.value)
            return cached.data
        logger.debug("Constants cache MISS: %s", category.value)
        data = await fetch_options_or_fallback(self.source, category)
        self._entries[category] = CacheEntry(data=data, timestamp=self.clock())
        return data

    async def get_job_roles(self) -> tuple[Option, ...]:
        return await self.get(ConstantCategory.JOB_ROLES)

    async def get_primary_products(self) -> tuple[Option, ...]:
        return await self.get(ConstantCategory.PRIMARY_PRODUCTS)

    async def get_job_types(self) -> tuple[Option, ...]:
        return await self.get(ConstantCategory.JOB_TYPES)

    async def get_countries(self) -> tuple[Option, ...]:
        return await self.get(ConstantCategory.COUNTRIES)

    async def get_all(self) -> JobConstants:
        """Return all categories; each is served or fetched independently."""
        categories = list(ConstantCategory)
        results = await asyncio.gather(*(self.get(c) for c in categories))
        return JobConstants.from_categories(dict(zip(categories, results)))

    async def refresh(self) -> JobConstants:
        """Discard every entry and eagerly repopulate all categories.

        Not atomic across categories: entries are cleared first, so a failure
        midway leaves some categories empty until the next read repopulates them.
        """
        async with TracedOperation("constants.refresh"):
            self.clear()
            constants = await self.get_all()
        logger.info(
            "Constants cache refreshed: %s roles, %s products, %s types, %s countries",
            len(constants.job_roles),
            len(constants.primary_products),
            len(constants.job_types),
            len(constants.countries),
        )
        return constants
