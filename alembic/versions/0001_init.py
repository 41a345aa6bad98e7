"""init schema

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-18
"""

from __future__ import annotations

# 执行方式：在项目根目录运行 `alembic upgrade head`。
from alembic import op
import sqlalchemy as sa


revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


if __name__ == "__main__":
    raise SystemExit(
        "This file is an Alembic migration script. "
        "Do NOT run it with `python`. "
        "Run `alembic upgrade head` from the project root instead."
    )


def upgrade() -> None:
    # users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_name"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_users_user_name", "users", ["user_name"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # books
    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("published_year", sa.Integer(), nullable=True),
        sa.Column("owner_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_books_owner_id", "books", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_books_owner_id", table_name="books")
    op.drop_table("books")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_user_name", table_name="users")
    op.drop_table("users")
