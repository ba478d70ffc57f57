"""Multi-row INSERT builder for bulk writes."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Insert, Table, insert
from sqlalchemy.ext.asyncio import AsyncSession


class BulkInsert:
    """
    Accumulates rows for one table and renders them as a single INSERT.

    All values are bound parameters; the statement carries one VALUES tuple
    per added row. With no rows added nothing is rendered or executed.

    Usage:
        builder = BulkInsert(Location.__table__, ("movie_id", "name", "fun_fact"))
        builder.add(1, "City Hall", "")
        await builder.execute(db)
    """

    def __init__(self, table: Table, columns: Sequence[str]) -> None:
        """
        Initialize the builder.

        Args:
            table: Target table
            columns: Names of the columns every row provides, in row order

        Raises:
            ValueError: If a column does not exist in the table
        """
        unknown = [c for c in columns if c not in table.c]
        if unknown:
            raise ValueError(f"Unknown columns for table '{table.name}': {unknown}")

        self.table = table
        self.columns = tuple(columns)
        self._rows: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def add(self, *values: Any) -> None:
        """
        Add one row.

        Raises:
            ValueError: If the number of values differs from the number of columns
        """
        if len(values) != len(self.columns):
            raise ValueError(
                f"Row for table '{self.table.name}' has {len(values)} values, "
                f"expected {len(self.columns)} ({', '.join(self.columns)})"
            )
        self._rows.append(dict(zip(self.columns, values)))

    def statement(self) -> Insert | None:
        """Render the multi-row INSERT, or None when no rows were added."""
        if not self._rows:
            return None
        return insert(self.table).values(self._rows)

    async def execute(self, db: AsyncSession) -> int:
        """
        Execute the INSERT in the session's current transaction.

        Returns:
            Number of rows inserted (0 without touching the database)
        """
        stmt = self.statement()
        if stmt is None:
            return 0
        await db.execute(stmt)
        return len(self._rows)
