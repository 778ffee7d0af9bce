"""Role definitions table

Revision ID: 0001_roles
Revises: 
Create Date: 2026-10-18
"""
from __future__ import annotations

from alembic import op  # type: ignore
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_roles"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("int_id", sa.Integer(), nullable=False),
        sa.Column("string_id", sa.String(length=64), nullable=False, server_default=sa.text("''")),
        sa.Column("priority", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("badge_icon", sa.String(length=128), nullable=False, server_default=sa.text("''")),
        sa.Column("name_color", sa.String(length=255), nullable=False, server_default=sa.text("''")),
        sa.Column("chat_color", sa.String(length=16), nullable=False, server_default=sa.text("''")),
        sa.Column("permissions", sa.JSON(), nullable=True),
    )
    op.create_index("ix_roles_position", "roles", ["position"])
    op.create_index("ix_roles_int_id", "roles", ["int_id"])


def downgrade() -> None:
    op.drop_index("ix_roles_int_id", table_name="roles")
    op.drop_index("ix_roles_position", table_name="roles")
    op.drop_table("roles")
