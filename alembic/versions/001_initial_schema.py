"""Initial schema - users, folders, files and per-user grants.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _grant_table(name: str, column: str, target: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.String(255), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column(column, sa.UUID(), sa.ForeignKey(f"{target}.id", ondelete="CASCADE"), nullable=False),
        sa.Column("permissions", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("granted_by", sa.String(255), nullable=True),
        sa.CheckConstraint("permissions IN ('read', 'write')", name=f"ck_{name}_permissions"),
    )
    # One grant per (user, resource); grant creation relies on this for Conflict.
    op.create_index(f"ix_{name}_user_{column}", name, ["user_id", column], unique=True)
    op.create_index(f"ix_{name}_{column}", name, [column])


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("roles", postgresql.ARRAY(sa.String(50)), nullable=False, server_default="{user}"),
        sa.Column("is_superadmin", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_app_user_email", "app_user", ["email"], unique=True)

    op.create_table(
        "folder",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.String(255), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("parent_id", sa.UUID(), sa.ForeignKey("folder.id", ondelete="CASCADE"), nullable=True),
        sa.CheckConstraint("parent_id IS NULL OR parent_id <> id", name="ck_folder_not_own_parent"),
    )
    op.create_index("ix_folder_parent_id", "folder", ["parent_id"])
    op.create_index("ix_folder_owner_id", "folder", ["owner_id"])

    op.create_table(
        "file",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.String(255), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("folder_id", sa.UUID(), sa.ForeignKey("folder.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_file_folder_id", "file", ["folder_id"])

    _grant_table("user_folder_permission", "folder_id", "folder")
    _grant_table("user_file_permission", "file_id", "file")


def downgrade() -> None:
    op.drop_table("user_file_permission")
    op.drop_table("user_folder_permission")
    op.drop_table("file")
    op.drop_table("folder")
    op.drop_table("app_user")
