"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the process-wide job constants cache and
the cron secret check. Routes depend only on these dependencies, not on
infrastructure directly.
"""

from __future__ import annotations

import hmac
import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings
from app.domain.exceptions import AuthenticationException
from app.infrastructure.cache import JobConstantsCache, JobConstantsCacheProtocol
from app.infrastructure.persistence.database import get_session_factory
from app.infrastructure.persistence.repositories import JobConstantsRepository

logger = logging.getLogger(__name__)


def build_job_constants_cache(settings: Settings) -> JobConstantsCache:
    """Build the process-wide cache over the jobs table repository."""
    repo = JobConstantsRepository(get_session_factory(), table_name=settings.jobs_table)
    return JobConstantsCache(repo, ttl_seconds=settings.constants_cache_ttl_seconds)


def get_job_constants_cache(request: Request) -> JobConstantsCacheProtocol:
    """Return the cache built at startup (app.state.job_constants_cache).

    Built on first use when the lifespan did not run (e.g. ASGI test
    transports), so there is still exactly one instance per app.
    """
    cache = getattr(request.app.state, "job_constants_cache", None)
    if cache is None:
        cache = build_job_constants_cache(get_settings())
        request.app.state.job_constants_cache = cache
    return cache


_http_bearer = HTTPBearer(auto_error=False)


def verify_cron_secret(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> None:
    """Require Authorization: Bearer <CRON_SECRET> in production.

    Outside production the check is skipped (local scheduler, development).
    A production deployment without CRON_SECRET rejects every request.
    """
    settings = get_settings()
    if not settings.is_production:
        return
    expected = settings.cron_secret.get_secret_value() if settings.cron_secret else ""
    if not expected:
        logger.error("CRON_SECRET is not set; rejecting scheduled sync request")
        raise AuthenticationException()
    if credentials is None or not hmac.compare_digest(
        credentials.credentials.encode(), expected.encode()
    ):
        logger.warning("Rejected scheduled sync request: invalid or missing bearer secret")
        raise AuthenticationException()
