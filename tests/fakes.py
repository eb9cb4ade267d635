"""In-memory test doubles shared by unit and API tests."""

from collections.abc import Sequence


class FakeSource:
    """In-memory IDistinctValueSource: column name -> raw rows.

    Counts calls per column; set error to make every query raise.
    """

    def __init__(
        self,
        rows: dict[str, Sequence[object]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.rows = rows or {}
        self.error = error
        self.calls: dict[str, int] = {}

    async def distinct_values(self, column: str) -> Sequence[object]:
        self.calls[column] = self.calls.get(column, 0) + 1
        if self.error is not None:
            raise self.error
        return list(self.rows.get(column, []))

    def total_calls(self) -> int:
        return sum(self.calls.values())


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


JOB_ROWS: dict[str, list[object]] = {
    "job_role": ["solution_architect", "data_engineer", "solution_architect", None, ""],
    "primary_product": ["data_cloud", "sales_cloud"],
    "job_type": ["full-time", "contract"],
    "location_country": ["US", "DE"],
}
