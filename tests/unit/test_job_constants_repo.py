"""JobConstantsRepository: column allow-list and distinct-values query."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.exceptions import SqlNotConfiguredException, ValidationException
from app.infrastructure.persistence.repositories import JobConstantsRepository


@pytest.fixture
def session():
    """Mock AsyncSession whose execute() returns job_type rows."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = ["contract", "full-time", "full-time"]
    session = AsyncMock()
    session.execute = AsyncMock(return_value=result)
    return session


@pytest.fixture
def session_factory(session):
    """Callable returning an async context manager yielding the mock session."""
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=session)
    cm.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=cm)


async def test_distinct_values_returns_rows(session_factory, session) -> None:
    repo = JobConstantsRepository(session_factory, table_name="transformed_jobs")
    values = await repo.distinct_values("job_type")
    assert values == ["contract", "full-time", "full-time"]
    stmt = session.execute.call_args.args[0]
    sql = str(stmt)
    assert "FROM transformed_jobs" in sql
    assert "job_type IS NOT NULL" in sql
    assert "ORDER BY job_type" in sql


async def test_unknown_column_rejected(session_factory) -> None:
    repo = JobConstantsRepository(session_factory)
    with pytest.raises(ValidationException):
        await repo.distinct_values("email; drop table transformed_jobs")
    session_factory.assert_not_called()


async def test_no_database_configured() -> None:
    repo = JobConstantsRepository(None)
    with pytest.raises(SqlNotConfiguredException):
        await repo.distinct_values("job_role")
