"""add special_days.is_feast_day

Revision ID: 3a5c7e9b1d24
Revises: 2b7d4e6f8a13
Create Date: 2024-12-08 22:05:00.000000

"""
from typing import Sequence, Union

from alembic import op

from src.schema import SPECIAL_DAY_FEAST_FLAG, ColumnAdditionStep, SqlExecutor


# revision identifiers, used by Alembic.
revision: str = "3a5c7e9b1d24"
down_revision: Union[str, Sequence[str], None] = "2b7d4e6f8a13"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    ColumnAdditionStep(SqlExecutor(bind), SPECIAL_DAY_FEAST_FLAG, dialect=bind.dialect.name).apply()


def downgrade() -> None:
    """Downgrade schema."""
    bind = op.get_bind()
    ColumnAdditionStep(SqlExecutor(bind), SPECIAL_DAY_FEAST_FLAG, dialect=bind.dialect.name).revert()
