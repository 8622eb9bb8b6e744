from __future__ import annotations

from dataclasses import dataclass, field
import logging

from .catalog import POSTGRESQL, QueryExecutor, SchemaCatalog

logger = logging.getLogger("lectionary.schema.column_step")


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    column_type: str
    default: str | None = None


@dataclass(frozen=True)
class IndexSpec:
    name: str
    columns: tuple[str, ...]


@dataclass(frozen=True)
class ColumnAddition:
    """Columns and indexes added to one table by a single migration."""
    table: str
    columns: tuple[ColumnSpec, ...]
    indexes: tuple[IndexSpec, ...] = field(default_factory=tuple)


SPECIAL_DAY_COLUMNS = ColumnAddition(
    table="special_days",
    columns=(
        ColumnSpec("description", "text"),
        ColumnSpec("rank", "varchar(50)"),
        ColumnSpec("is_moveable", "boolean", default="false"),
        ColumnSpec("liturgical_color", "varchar(10)"),
        ColumnSpec("year", "integer"),
    ),
    indexes=(IndexSpec("idx_special_day_year", ("year",)),),
)

SPECIAL_DAY_FEAST_FLAG = ColumnAddition(
    table="special_days",
    columns=(ColumnSpec("is_feast_day", "boolean", default="false"),),
)

READING_OFFICE_COLUMNS = ColumnAddition(
    table="readings",
    columns=(
        ColumnSpec("reading_office", "varchar(50)", default="'sunday'"),
        ColumnSpec("cycle_year", "varchar(50)"),
    ),
    indexes=(
        IndexSpec("IDX_reading_office", ("reading_office",)),
        IndexSpec("IDX_cycle_year", ("cycle_year",)),
    ),
)


class ColumnAdditionStep:
    """Idempotent add/drop of columns and their indexes on one table.

    apply() skips a missing table, adds only absent columns and creates
    indexes with IF NOT EXISTS. revert() drops the indexes first, then the
    columns in reverse order, tolerating anything already gone.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        addition: ColumnAddition,
        dialect: str = POSTGRESQL,
    ) -> None:
        self._catalog = SchemaCatalog(executor, dialect)
        self._addition = addition

    def apply(self) -> None:
        addition = self._addition
        if not self._catalog.table_exists(addition.table):
            logger.info("%s table does not exist, skipping column additions", addition.table)
            return

        for column in addition.columns:
            if self._catalog.add_column(
                addition.table, column.name, column.column_type, default=column.default
            ):
                logger.info("Ensured column %s.%s exists", addition.table, column.name)

        for index in addition.indexes:
            self._catalog.create_index(addition.table, index.name, index.columns)

    def revert(self) -> None:
        addition = self._addition
        # sqlite refuses to drop an indexed column.
        for index in reversed(addition.indexes):
            self._catalog.drop_index(addition.table, index.name)

        for column in reversed(addition.columns):
            if self._catalog.drop_column(addition.table, column.name):
                logger.info("Dropped column %s.%s", addition.table, column.name)
