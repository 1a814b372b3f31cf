"""Add damages table for road damage reports.

Revision ID: 20241001100000
Revises: 20241001000000
Create Date: 2024-10-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20241001100000"
down_revision: Union[str, None] = "20241001000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "damages",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("type", sa.String(length=255), nullable=False),
        sa.Column("severity", sa.String(length=16), nullable=False),
        sa.Column("location", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("reported_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="Pending"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_damages_severity"), "damages", ["severity"], unique=False)
    op.create_index(op.f("ix_damages_status"), "damages", ["status"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_damages_status"), table_name="damages")
    op.drop_index(op.f("ix_damages_severity"), table_name="damages")
    op.drop_table("damages")
