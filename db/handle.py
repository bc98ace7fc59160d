"""
Store handle injected into seeders.

Seeders only see the `DataHandle` protocol, so the runner can hand them a SQL-backed
handle in production and a recording double in tests.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

import sqlalchemy as sa

Row = Mapping[str, Any]


class DataHandle(Protocol):
    def bulk_insert(self, table: str, rows: Sequence[Row]) -> int: ...

    def bulk_delete(self, table: str) -> int: ...


def _normalize_rows(rows: Sequence[Row]) -> list[dict[str, Any]]:
    # executemany binds every row against the first row's keys; pad missing keys with NULL.
    keys: list[str] = []
    for row in rows:
        keys.extend(k for k in row if k not in keys)
    return [{k: row.get(k) for k in keys} for row in rows]


class SqlDataHandle:
    """`DataHandle` over a live SQLAlchemy connection.

    Tables are reflected on first use and cached for the lifetime of the handle. The caller
    owns the transaction: a failed statement leaves nothing committed once it rolls back.
    """

    def __init__(self, conn: sa.Connection) -> None:
        self._conn = conn
        self._meta = sa.MetaData()

    def table(self, name: str) -> sa.Table:
        if name not in self._meta.tables:
            sa.Table(name, self._meta, autoload_with=self._conn)
        return self._meta.tables[name]

    def bulk_insert(self, table: str, rows: Sequence[Row]) -> int:
        if not rows:
            return 0
        self._conn.execute(self.table(table).insert(), _normalize_rows(rows))
        return len(rows)

    def bulk_delete(self, table: str) -> int:
        result = self._conn.execute(self.table(table).delete())
        return result.rowcount
