"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class IDistinctValueSource(Protocol):
    """Protocol for the jobs data source used to derive constants (DIP).

    The only storage capability the constants cache needs: read one column
    of the jobs table, skipping NULLs, ordered by that column.
    """

    async def distinct_values(self, column: str) -> Sequence[object]:
        """Return non-null values of column ordered by column (may contain repeats)."""
        ...
