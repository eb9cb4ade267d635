"""Jobs table repository integration tests. Require Postgres with a populated jobs table."""

import pytest

from app.core.config import get_settings
from app.domain.enums import ConstantCategory
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import JobConstantsRepository


@pytest.fixture
async def repo():
    """Repository over the configured database; skips when DATABASE_URL is unset."""
    session_factory = database.get_session_factory()
    if session_factory is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    yield JobConstantsRepository(session_factory, table_name=get_settings().jobs_table)
    await database.dispose_engine()


@pytest.mark.requires_db
@pytest.mark.parametrize("category", list(ConstantCategory))
async def test_distinct_values_are_non_null(repo, category) -> None:
    values = await repo.distinct_values(category.column)
    assert None not in values
    assert all(isinstance(v, str) for v in values)
