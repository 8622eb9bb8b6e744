from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Connection


class SqlExecutor:
    """Runs raw SQL on a SQLAlchemy connection and returns fetched rows."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    @property
    def dialect(self) -> str:
        return self._connection.dialect.name

    def execute(self, sql: str) -> list:
        result = self._connection.execute(text(sql))
        if not result.returns_rows:
            return []
        return list(result.fetchall())
