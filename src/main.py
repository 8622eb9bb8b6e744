import os
import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from src.api.database.database import engine
from src.schema import (
    LITURGICAL_COLOR_RENAME,
    READING_TRANSLATION_RENAME,
    SchemaError,
    SchemaRenameStep,
    SqlExecutor,
)
from src.schema.migrate import current_revision, run_migrations

# Load environment variables
load_dotenv()

logger = logging.getLogger("lectionary.main")

origins = [origin for origin in [os.getenv("FRONTEND_BASE_URL")] if origin]

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def read_root():
    return {"message": "Lectionary API"}


# DB Start up after deploying
@app.on_event("startup")
async def migrate_on_startup():
    if os.getenv("RUN_MIGRATIONS_ON_STARTUP", "true").lower() != "true":
        logger.info("Skipping startup migrations")
        return
    run_migrations("head")


# SCHEMA HEALTH -----------------------------------------------------------------------------------
@app.get("/health/schema")
def get_SchemaStatus():
    """
    Report the applied migration revision and which column names are live.

    Returns:
        dict: Current revision plus per-table legacy/canonical column presence.
    """
    try:
        return schemaStatus()
    except SchemaError as e:
        raise HTTPException(status_code=500, detail=str(e))


def schemaStatus(db_engine=None) -> dict:
    db_engine = db_engine or engine
    columns = {}
    with db_engine.connect() as connection:
        executor = SqlExecutor(connection)
        for rename in (LITURGICAL_COLOR_RENAME, READING_TRANSLATION_RENAME):
            step = SchemaRenameStep(executor, rename, dialect=executor.dialect)
            columns[rename.table] = {
                rename.legacy_name: step.column_exists(rename.legacy_name),
                rename.canonical_name: step.column_exists(rename.canonical_name),
            }
    return {"revision": current_revision(db_engine), "columns": columns}
