from __future__ import annotations


class SchemaError(Exception):
    """Base error for schema migration steps."""

    def __init__(self, message: str, statement: str | None = None) -> None:
        super().__init__(message)
        self.statement = statement


class CatalogQueryError(SchemaError):
    """Catalog introspection failed (connectivity, permissions)."""


class DdlExecutionError(SchemaError):
    """A rename or add-column statement failed."""
