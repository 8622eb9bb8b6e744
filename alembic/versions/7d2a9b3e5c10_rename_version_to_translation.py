"""rename readings.version to translation

Revision ID: 7d2a9b3e5c10
Revises: 4c8e1d2f9a61
Create Date: 2025-08-28 23:45:52.750000

"""
from typing import Sequence, Union

from alembic import op

from src.schema import READING_TRANSLATION_RENAME, SchemaRenameStep, SqlExecutor


# revision identifiers, used by Alembic.
revision: str = "7d2a9b3e5c10"
down_revision: Union[str, Sequence[str], None] = "4c8e1d2f9a61"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    step = SchemaRenameStep(
        SqlExecutor(bind),
        READING_TRANSLATION_RENAME,
        dialect=bind.dialect.name,
    )
    step.apply()


def downgrade() -> None:
    """Downgrade schema."""
    bind = op.get_bind()
    step = SchemaRenameStep(
        SqlExecutor(bind),
        READING_TRANSLATION_RENAME,
        dialect=bind.dialect.name,
    )
    step.revert()
