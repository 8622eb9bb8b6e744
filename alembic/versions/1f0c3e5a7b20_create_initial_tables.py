"""create initial special_days and readings tables

Revision ID: 1f0c3e5a7b20
Revises:
Create Date: 2024-12-08 21:50:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "1f0c3e5a7b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "special_days",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("type", sa.String(), server_default="other", nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_special_day_date", "special_days", ["date"], unique=False)

    op.create_table(
        "readings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("reading_type", sa.String(), nullable=False),
        sa.Column("citation", sa.String(), nullable=False),
        sa.Column("version", sa.String(length=50), server_default="NRSV"),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_reading_date", "readings", ["date"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_reading_date", table_name="readings")
    op.drop_table("readings")
    op.drop_index("idx_special_day_date", table_name="special_days")
    op.drop_table("special_days")
