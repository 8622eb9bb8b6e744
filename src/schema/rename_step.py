from __future__ import annotations

from dataclasses import dataclass
import logging

from .catalog import POSTGRESQL, QueryExecutor, SchemaCatalog

logger = logging.getLogger("lectionary.schema.rename_step")


@dataclass(frozen=True)
class ColumnRename:
    """A column moving from its legacy name to its canonical name.

    ``keep_existing_canonical`` leaves the table alone when both names are
    present instead of attempting the rename.
    """
    table: str
    legacy_name: str
    canonical_name: str
    column_type: str
    default: str | None = None
    keep_existing_canonical: bool = False


LITURGICAL_COLOR_RENAME = ColumnRename(
    table="special_days",
    legacy_name="liturgical_color",
    canonical_name="liturgicalColor",
    column_type="varchar(10)",
)

READING_TRANSLATION_RENAME = ColumnRename(
    table="readings",
    legacy_name="version",
    canonical_name="translation",
    column_type="varchar(50)",
    default="'NRSV'",
    keep_existing_canonical=True,
)


class SchemaRenameStep:
    """Guarded, reversible column rename for a single table.

    apply() renames the legacy column when the catalog reports it, and
    otherwise makes sure the canonical column exists. revert() renames the
    canonical column back without looking at the catalog first.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        rename: ColumnRename = LITURGICAL_COLOR_RENAME,
        dialect: str = POSTGRESQL,
    ) -> None:
        self._catalog = SchemaCatalog(executor, dialect)
        self._rename = rename

    @property
    def rename(self) -> ColumnRename:
        return self._rename

    def apply(self) -> None:
        rename = self._rename
        if self.column_exists(rename.legacy_name):
            if rename.keep_existing_canonical and self.column_exists(rename.canonical_name):
                logger.info(
                    "Both %s.%s and %s.%s exist, leaving columns untouched",
                    rename.table,
                    rename.legacy_name,
                    rename.table,
                    rename.canonical_name,
                )
                return
            self._catalog.rename_column(
                rename.table, rename.legacy_name, rename.canonical_name
            )
            logger.info(
                "Renamed %s.%s to %s",
                rename.table,
                rename.legacy_name,
                rename.canonical_name,
            )
            return

        added = self._catalog.add_column(
            rename.table,
            rename.canonical_name,
            rename.column_type,
            default=rename.default,
        )
        if added:
            logger.info("Ensured column %s.%s exists", rename.table, rename.canonical_name)
        else:
            logger.info(
                "Column %s.%s already present, nothing to add",
                rename.table,
                rename.canonical_name,
            )

    def revert(self) -> None:
        rename = self._rename
        self._catalog.rename_column(rename.table, rename.canonical_name, rename.legacy_name)
        logger.info(
            "Renamed %s.%s back to %s",
            rename.table,
            rename.canonical_name,
            rename.legacy_name,
        )

    def column_exists(self, column_name: str) -> bool:
        return self._catalog.column_exists(self._rename.table, column_name)
