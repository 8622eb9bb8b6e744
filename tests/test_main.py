from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import create_engine

import src.main as main_module
from src.schema.exceptions import CatalogQueryError
from src.schema.migrate import run_migrations


def test_schema_status_reports_revision_and_columns(tmp_path) -> None:
    database_url = f"sqlite:///{tmp_path / 'status.db'}"
    run_migrations("head", database_url=database_url)
    engine = create_engine(database_url)
    try:
        status = main_module.schemaStatus(engine)
    finally:
        engine.dispose()

    assert status == {
        "revision": "8e4f2a6c0b37",
        "columns": {
            "special_days": {"liturgical_color": False, "liturgicalColor": True},
            "readings": {"version": False, "translation": True},
        },
    }


def test_schema_status_route_maps_schema_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(db_engine=None) -> dict:
        raise CatalogQueryError("catalog unavailable")

    monkeypatch.setattr(main_module, "schemaStatus", _fail)

    with pytest.raises(main_module.HTTPException) as excinfo:
        main_module.get_SchemaStatus()

    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == "catalog unavailable"


def test_startup_migrations_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "false")
    monkeypatch.setattr(main_module, "run_migrations", lambda revision: calls.append(revision))

    asyncio.run(main_module.migrate_on_startup())

    assert calls == []


def test_startup_runs_migrations_to_head(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "true")
    monkeypatch.setattr(main_module, "run_migrations", lambda revision: calls.append(revision))

    asyncio.run(main_module.migrate_on_startup())

    assert calls == ["head"]
