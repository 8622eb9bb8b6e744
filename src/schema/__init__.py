from .catalog import QueryExecutor, SchemaCatalog
from .column_step import (
    READING_OFFICE_COLUMNS,
    SPECIAL_DAY_COLUMNS,
    SPECIAL_DAY_FEAST_FLAG,
    ColumnAddition,
    ColumnAdditionStep,
    ColumnSpec,
    IndexSpec,
)
from .exceptions import CatalogQueryError, DdlExecutionError, SchemaError
from .executor import SqlExecutor
from .rename_step import (
    LITURGICAL_COLOR_RENAME,
    READING_TRANSLATION_RENAME,
    ColumnRename,
    SchemaRenameStep,
)

__all__ = [
    "QueryExecutor",
    "SchemaCatalog",
    "READING_OFFICE_COLUMNS",
    "SPECIAL_DAY_COLUMNS",
    "SPECIAL_DAY_FEAST_FLAG",
    "ColumnAddition",
    "ColumnAdditionStep",
    "ColumnSpec",
    "IndexSpec",
    "CatalogQueryError",
    "DdlExecutionError",
    "SchemaError",
    "SqlExecutor",
    "LITURGICAL_COLOR_RENAME",
    "READING_TRANSLATION_RENAME",
    "ColumnRename",
    "SchemaRenameStep",
]
