"""Create auth tables and monuments with per-language slugs.

Revision ID: initial_schema_20250602
Revises:
Create Date: 2025-06-02 00:00:00.000000
"""
from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from alembic import op
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "initial_schema_20250602"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def upgrade() -> None:
    """Apply the initial schema."""
    bind = op.get_bind()
    inspector = inspect(bind)
    tables = inspector.get_table_names()

    if "roles" not in tables:
        op.create_table(
            "roles",
            sa.Column("id", sa.UUID(), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column(
                "permissions",
                postgresql.JSONB(astext_type=sa.Text()),
                nullable=False,
                server_default=sa.text("'[]'::jsonb"),
            ),
            sa.Column("description", sa.Text(), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f("ix_roles_id"), "roles", ["id"], unique=False)
        op.create_index(op.f("ix_roles_name"), "roles", ["name"], unique=True)

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.UUID(), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("password_hash", sa.String(length=255), nullable=False),
            sa.Column("full_name", sa.String(length=255), nullable=False),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
        op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    if "user_role_association" not in tables:
        op.create_table(
            "user_role_association",
            sa.Column("user_id", sa.UUID(), nullable=False),
            sa.Column("role_id", sa.UUID(), nullable=False),
            sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
            sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("user_id", "role_id"),
        )

    if "monuments" not in tables:
        op.create_table(
            "monuments",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("monument_name_en", sa.String(length=255), nullable=False),
            sa.Column("monument_name_ar", sa.String(length=255), nullable=False),
            sa.Column("monument_biography_en", sa.Text(), nullable=True),
            sa.Column("monument_biography_ar", sa.Text(), nullable=True),
            sa.Column("lat", sa.String(length=50), nullable=True),
            sa.Column("lng", sa.String(length=50), nullable=True),
            sa.Column("zoom", sa.String(length=20), nullable=True),
            sa.Column("center", sa.String(length=100), nullable=True),
            sa.Column("image", sa.String(length=1024), nullable=True),
            sa.Column("m_date", sa.String(length=100), nullable=True),
            sa.Column("slug_en", sa.String(length=255), nullable=True),
            sa.Column("slug_ar", sa.String(length=255), nullable=True),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("slug_en", name="uq_monuments_slug_en"),
            sa.UniqueConstraint("slug_ar", name="uq_monuments_slug_ar"),
        )
        op.create_index(op.f("ix_monuments_id"), "monuments", ["id"], unique=False)


def downgrade() -> None:
    """Drop the initial schema."""
    op.drop_index(op.f("ix_monuments_id"), table_name="monuments")
    op.drop_table("monuments")
    op.drop_table("user_role_association")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
    op.drop_index(op.f("ix_roles_name"), table_name="roles")
    op.drop_index(op.f("ix_roles_id"), table_name="roles")
    op.drop_table("roles")
