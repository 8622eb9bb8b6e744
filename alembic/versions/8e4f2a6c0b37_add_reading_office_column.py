"""add readings.reading_office and cycle_year

Revision ID: 8e4f2a6c0b37
Revises: 7d2a9b3e5c10
Create Date: 2025-08-28 23:46:40.000000

"""
from typing import Sequence, Union

from alembic import op

from src.schema import READING_OFFICE_COLUMNS, ColumnAdditionStep, SqlExecutor


# revision identifiers, used by Alembic.
revision: str = "8e4f2a6c0b37"
down_revision: Union[str, Sequence[str], None] = "7d2a9b3e5c10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    _column_step().apply()


def downgrade() -> None:
    """Downgrade schema."""
    _column_step().revert()


def _column_step() -> ColumnAdditionStep:
    bind = op.get_bind()
    return ColumnAdditionStep(
        SqlExecutor(bind),
        READING_OFFICE_COLUMNS,
        dialect=bind.dialect.name,
    )
