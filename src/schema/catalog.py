from __future__ import annotations

from typing import Protocol
import logging

from .exceptions import CatalogQueryError, DdlExecutionError

logger = logging.getLogger("lectionary.schema.catalog")

POSTGRESQL = "postgresql"
SQLITE = "sqlite"
SUPPORTED_DIALECTS = (POSTGRESQL, SQLITE)


class QueryExecutor(Protocol):
    """Runs one SQL statement and returns the rows it produced.

    Any exception raised here is treated as a failure of the database and
    surfaces from the schema steps as a SchemaError subclass.
    """

    def execute(self, sql: str) -> list:
        raise NotImplementedError


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class SchemaCatalog:
    """Dialect-aware catalog probes and guarded DDL over a QueryExecutor."""

    def __init__(self, executor: QueryExecutor, dialect: str = POSTGRESQL) -> None:
        if dialect not in SUPPORTED_DIALECTS:
            raise ValueError(f"Unsupported dialect for schema changes: {dialect}")
        self._executor = executor
        self._dialect = dialect

    @property
    def dialect(self) -> str:
        return self._dialect

    def table_exists(self, table: str) -> bool:
        name = quote_literal(table)
        if self._dialect == SQLITE:
            sql = f"SELECT name FROM sqlite_master WHERE type = 'table' AND name = {name}"
        else:
            sql = f"SELECT table_name FROM information_schema.tables WHERE table_name = {name}"
        return self._probe(sql, table)

    def column_exists(self, table: str, column: str) -> bool:
        table_name = quote_literal(table)
        column_name = quote_literal(column)
        if self._dialect == SQLITE:
            sql = (
                f"SELECT name AS column_name FROM pragma_table_info({table_name}) "
                f"WHERE name = {column_name}"
            )
        else:
            sql = (
                "SELECT column_name FROM information_schema.columns "
                f"WHERE table_name = {table_name} AND column_name = {column_name}"
            )
        return self._probe(sql, f"{table}.{column}")

    def rename_column(self, table: str, old_name: str, new_name: str) -> None:
        self.run_ddl(
            table,
            f"ALTER TABLE {quote_identifier(table)} "
            f"RENAME COLUMN {quote_identifier(old_name)} TO {quote_identifier(new_name)}",
        )

    def add_column(
        self,
        table: str,
        column: str,
        column_type: str,
        default: str | None = None,
    ) -> bool:
        """Add ``column`` unless it is already there. Returns True when added."""
        column_sql = f"{quote_identifier(column)} {column_type}"
        if default is not None:
            column_sql += f" DEFAULT {default}"

        if self._dialect == POSTGRESQL:
            self.run_ddl(
                table,
                f"ALTER TABLE {quote_identifier(table)} ADD COLUMN IF NOT EXISTS {column_sql}",
            )
            return True

        # sqlite has no IF NOT EXISTS for columns.
        if self.column_exists(table, column):
            return False
        self.run_ddl(table, f"ALTER TABLE {quote_identifier(table)} ADD COLUMN {column_sql}")
        return True

    def drop_column(self, table: str, column: str) -> bool:
        """Drop ``column`` if present. Returns True when a drop was issued."""
        if self._dialect == POSTGRESQL:
            self.run_ddl(
                table,
                f"ALTER TABLE {quote_identifier(table)} "
                f"DROP COLUMN IF EXISTS {quote_identifier(column)}",
            )
            return True

        if not self.column_exists(table, column):
            return False
        self.run_ddl(
            table,
            f"ALTER TABLE {quote_identifier(table)} DROP COLUMN {quote_identifier(column)}",
        )
        return True

    def create_index(self, table: str, index: str, columns: tuple[str, ...]) -> None:
        column_list = ", ".join(quote_identifier(column) for column in columns)
        self.run_ddl(
            table,
            f"CREATE INDEX IF NOT EXISTS {quote_identifier(index)} "
            f"ON {quote_identifier(table)} ({column_list})",
        )

    def drop_index(self, table: str, index: str) -> None:
        self.run_ddl(table, f"DROP INDEX IF EXISTS {quote_identifier(index)}")

    def run_ddl(self, table: str, sql: str) -> None:
        try:
            self._executor.execute(sql)
        except Exception as exc:
            logger.exception("DDL failed on table %s", table)
            raise DdlExecutionError(
                f"Schema change on {table} failed: {exc}",
                statement=sql,
            ) from exc

    def _probe(self, sql: str, target: str) -> bool:
        try:
            rows = self._executor.execute(sql)
        except Exception as exc:
            logger.exception("Catalog query failed for %s", target)
            raise CatalogQueryError(
                f"Could not inspect {target}: {exc}",
                statement=sql,
            ) from exc
        return len(rows) > 0
