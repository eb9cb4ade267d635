"""Cache protocol for job constants consumers (DIP).

Request handlers depend on this protocol; JobConstantsCache is the
process-wide implementation and tests may substitute their own.
"""

from typing import Protocol

from app.domain.enums import ConstantCategory
from app.domain.value_objects import JobConstants, Option


class JobConstantsCacheProtocol(Protocol):
    """Protocol for the server-side job constants cache."""

    async def get(self, category: ConstantCategory) -> tuple[Option, ...]:
        """Return options for one category (read-through)."""
        ...

    async def get_all(self) -> JobConstants:
        """Return all four categories."""
        ...

    async def refresh(self) -> JobConstants:
        """Reset every category and repopulate eagerly."""
        ...
