"""Pytest configuration and fixtures for the job constants service.

HTTP tests run against app.main:app through an ASGI transport with the
constants cache replaced by one over an in-memory source, so no database
is needed. All imports use app.*.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_job_constants_cache
from app.core.config import get_settings
from app.core.limiter import limiter
from app.infrastructure.cache import JobConstantsCache
from app.main import app
from tests.fakes import JOB_ROWS, FakeClock, FakeSource


@pytest.fixture
def source() -> FakeSource:
    """Source with a few roles, products, types, and countries (including repeats)."""
    return FakeSource(rows=JOB_ROWS)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(source: FakeSource, clock: FakeClock) -> JobConstantsCache:
    """Server cache over the fake source with a 30-minute TTL."""
    return JobConstantsCache(source, ttl_seconds=1800, clock=clock)


@pytest.fixture(autouse=True)
def _reset_settings():
    """Clear cached settings around each test so env overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client(cache: JobConstantsCache) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with the fake-backed cache."""
    app.dependency_overrides[get_job_constants_cache] = lambda: cache
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()
