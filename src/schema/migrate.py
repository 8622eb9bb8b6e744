from __future__ import annotations

from pathlib import Path
import logging
import os

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import Engine

logger = logging.getLogger("lectionary.schema.migrate")

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def build_alembic_config(database_url: str | None = None) -> Config:
    # ALEMBIC_CONFIG is the variable the alembic CLI honours as well.
    alembic_cfg = Config(os.getenv("ALEMBIC_CONFIG", str(ALEMBIC_INI)))
    url = database_url or os.getenv("DATABASE_URL")
    if url:
        # ConfigParser interpolation treats % as special.
        alembic_cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return alembic_cfg


def run_migrations(revision: str = "head", database_url: str | None = None) -> None:
    """Upgrade the database to ``revision``."""
    logger.info("Upgrading database schema to %s", revision)
    command.upgrade(build_alembic_config(database_url), revision)


def revert_migrations(revision: str = "-1", database_url: str | None = None) -> None:
    """Downgrade the database to ``revision`` (one step back by default)."""
    logger.info("Downgrading database schema to %s", revision)
    command.downgrade(build_alembic_config(database_url), revision)


def current_revision(engine: Engine | None = None) -> str | None:
    if engine is None:
        from src.api.database.database import engine

    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()
