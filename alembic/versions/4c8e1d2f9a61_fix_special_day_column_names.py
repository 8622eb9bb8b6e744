"""fix special_days column names to camelCase

Revision ID: 4c8e1d2f9a61
Revises: 3a5c7e9b1d24
Create Date: 2024-12-08 22:10:00.000000

"""
from typing import Sequence, Union

from alembic import op

from src.schema import LITURGICAL_COLOR_RENAME, SchemaRenameStep, SqlExecutor


# revision identifiers, used by Alembic.
revision: str = "4c8e1d2f9a61"
down_revision: Union[str, Sequence[str], None] = "3a5c7e9b1d24"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    _rename_step().apply()


def downgrade() -> None:
    """Downgrade schema."""
    _rename_step().revert()


def _rename_step() -> SchemaRenameStep:
    bind = op.get_bind()
    return SchemaRenameStep(
        SqlExecutor(bind),
        LITURGICAL_COLOR_RENAME,
        dialect=bind.dialect.name,
    )
