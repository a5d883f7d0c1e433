"""In-memory stand-ins for the storefront collaborators"""
from typing import List, Optional, Tuple


class FakeCartDriver:
    """
    In-memory cart view.

    Rows are (name, raw price text). The reported total is the sum of row
    prices rendered like the storefront does, unless `total_override` is set.
    With `lag_reads=N`, count_rows keeps returning the pre-delete count for
    N reads after each delete_row, like a table that re-renders late.
    """

    def __init__(
        self,
        rows: Optional[List[Tuple[str, str]]] = None,
        total_override: Optional[str] = None,
        lag_reads: int = 0,
    ):
        self.rows = list(rows or [])
        self.total_override = total_override
        self.lag_reads = lag_reads
        self.deleted: List[int] = []
        self._stale_counts: List[int] = []

    async def count_rows(self) -> int:
        if self._stale_counts:
            return self._stale_counts.pop()
        return len(self.rows)

    async def row_name(self, position: int) -> str:
        return self.rows[position][0]

    async def row_price_text(self, position: int) -> Optional[str]:
        return self.rows[position][1]

    async def total_text(self) -> Optional[str]:
        if self.total_override is not None:
            return self.total_override
        if not self.rows:
            return ''
        return str(sum(int(price.lstrip('$').replace(',', '')) for _, price in self.rows))

    async def delete_row(self, position: int) -> None:
        self.deleted.append(position)
        self._stale_counts = [len(self.rows)] * self.lag_reads
        del self.rows[position]
