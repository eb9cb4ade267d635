"""Cache: process-wide job constants cache and its protocol.

JobConstantsCache is built once in app.core.lifespan and shared by all
request handlers in the process.
"""

from app.infrastructure.cache.cache_protocol import JobConstantsCacheProtocol
from app.infrastructure.cache.job_constants_cache import CacheEntry, JobConstantsCache

__all__ = [
    "CacheEntry",
    "JobConstantsCache",
    "JobConstantsCacheProtocol",
]
