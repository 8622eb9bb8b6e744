"""add special_days descriptive columns

Revision ID: 2b7d4e6f8a13
Revises: 1f0c3e5a7b20
Create Date: 2024-12-08 22:00:00.000000

"""
from typing import Sequence, Union

from alembic import op

from src.schema import SPECIAL_DAY_COLUMNS, ColumnAdditionStep, SqlExecutor


# revision identifiers, used by Alembic.
revision: str = "2b7d4e6f8a13"
down_revision: Union[str, Sequence[str], None] = "1f0c3e5a7b20"
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
        SPECIAL_DAY_COLUMNS,
        dialect=bind.dialect.name,
    )
