"""Server-side job constants cache: TTL, per-category independence, refresh."""

from app.domain.enums import ConstantCategory
from app.domain.fallback_options import fallback_job_constants, fallback_options
from app.infrastructure.cache import CacheEntry, JobConstantsCache
from tests.fakes import FakeClock, FakeSource


class TestCacheEntry:
    def test_fresh_strictly_inside_ttl(self) -> None:
        entry = CacheEntry(data=(), timestamp=100.0)
        assert entry.is_fresh(now=100.0, ttl_seconds=10)
        assert entry.is_fresh(now=109.9, ttl_seconds=10)
        assert not entry.is_fresh(now=110.0, ttl_seconds=10)


async def test_second_read_within_ttl_is_served_from_cache(cache, source) -> None:
    first = await cache.get_job_roles()
    second = await cache.get_job_roles()
    assert first == second
    assert [o.value for o in first] == ["solution_architect", "data_engineer"]
    assert source.calls == {"job_role": 1}


async def test_expired_entry_is_refetched(cache, source, clock) -> None:
    await cache.get_countries()
    clock.advance(1799)
    await cache.get_countries()
    assert source.calls["location_country"] == 1
    clock.advance(1)
    await cache.get_countries()
    assert source.calls["location_country"] == 2


async def test_categories_expire_independently(cache, source, clock) -> None:
    await cache.get_job_roles()
    clock.advance(1000)
    await cache.get_job_types()
    clock.advance(900)
    await cache.get_job_roles()
    await cache.get_job_types()
    assert source.calls == {"job_role": 2, "job_type": 1}


async def test_entries_start_empty_and_record_clock(cache, clock) -> None:
    assert cache.entry(ConstantCategory.JOB_TYPES) is None
    await cache.get(ConstantCategory.JOB_TYPES)
    entry = cache.entry(ConstantCategory.JOB_TYPES)
    assert entry is not None
    assert entry.timestamp == clock.now


async def test_get_all_assembles_every_category(cache, source) -> None:
    constants = await cache.get_all()
    assert [o.label for o in constants.primary_products] == ["Data Cloud", "Sales Cloud"]
    assert [o.label for o in constants.job_types] == ["Full-time", "Contract"]
    assert [o.label for o in constants.countries] == ["US", "DE"]
    assert source.total_calls() == 4


async def test_get_all_mixes_cached_and_fetched(cache, source) -> None:
    await cache.get_job_roles()
    await cache.get_all()
    assert source.calls["job_role"] == 1
    assert source.total_calls() == 4


async def test_source_failure_caches_fallback_for_ttl(clock) -> None:
    source = FakeSource(error=ConnectionError("db down"))
    cache = JobConstantsCache(source, ttl_seconds=1800, clock=clock)
    constants = await cache.get_all()
    assert constants == fallback_job_constants()
    await cache.get_all()
    assert source.total_calls() == 4


async def test_empty_column_falls_back_per_category(clock) -> None:
    source = FakeSource(rows={"job_role": ["solution_architect"]})
    cache = JobConstantsCache(source, ttl_seconds=1800, clock=clock)
    constants = await cache.get_all()
    assert [o.value for o in constants.job_roles] == ["solution_architect"]
    assert constants.countries == fallback_options(ConstantCategory.COUNTRIES)


async def test_refresh_refetches_everything(cache, source) -> None:
    await cache.get_all()
    source.rows = {**source.rows, "job_type": ["internship"]}
    constants = await cache.refresh()
    assert [o.value for o in constants.job_types] == ["internship"]
    assert source.total_calls() == 8


async def test_refresh_right_after_populate_resets_timestamps(cache, clock) -> None:
    await cache.get_all()
    clock.advance(600)
    await cache.refresh()
    entry = cache.entry(ConstantCategory.COUNTRIES)
    assert entry is not None
    assert entry.timestamp == clock.now


async def test_clear_forces_source_read(cache, source) -> None:
    await cache.get_job_types()
    cache.clear()
    assert cache.entry(ConstantCategory.JOB_TYPES) is None
    await cache.get_job_types()
    assert source.calls["job_type"] == 2


def test_default_ttl_is_thirty_minutes() -> None:
    cache = JobConstantsCache(FakeSource(), clock=FakeClock())
    assert cache.ttl_seconds == 1800


async def test_second_get_all_within_ttl_is_identical_and_queries_nothing(cache, source, clock) -> None:
    first = await cache.get_all()
    clock.advance(60)
    second = await cache.get_all()
    assert first.to_dict() == second.to_dict()
    assert source.total_calls() == 4
