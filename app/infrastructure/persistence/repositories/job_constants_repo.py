"""Jobs table repository: distinct column values used to derive job constants."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import column, select, table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.enums import ConstantCategory
from app.domain.exceptions import SqlNotConfiguredException, ValidationException

# Only the category columns may be queried; column names are never taken from requests.
ALLOWED_COLUMNS = frozenset(category.column for category in ConstantCategory)


class JobConstantsRepository:
    """Read-only access to the jobs table for constants derivation.

    Each call opens a short-lived session from the factory so the repository
    can be held by the process-wide cache across requests.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None,
        table_name: str = "transformed_jobs",
    ) -> None:
        self.session_factory = session_factory
        self.table_name = table_name

    async def distinct_values(self, column_name: str) -> Sequence[object]:
        """Return non-null values of column_name ordered by that column.

        Repeats are kept; deduplication happens in the option formatter.

        Raises:
            ValidationException: column_name is not a constants column.
            SqlNotConfiguredException: no database is configured.
        """
        if column_name not in ALLOWED_COLUMNS:
            raise ValidationException(
                f"Unsupported constants column: {column_name}", field="column"
            )
        if self.session_factory is None:
            raise SqlNotConfiguredException()
        col = column(column_name)
        jobs = table(self.table_name, col)
        stmt = select(col).select_from(jobs).where(col.is_not(None)).order_by(col)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())
