"""Create user, chat session and post tables

Revision ID: 0001
Revises:
Create Date: 2026-10-17

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create the three document tables."""
    op.create_table(
        "user",
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "chatsession",
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.UUID(as_uuid=True), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("messages", sa.JSON(), nullable=False),
        sa.Column("message_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_chatsession_user_id", "chatsession", ["user_id"])

    op.create_table(
        "post",
        sa.Column("id", sa.UUID(as_uuid=True), primary_key=True),
        sa.Column("author_id", sa.UUID(as_uuid=True), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.JSON(), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    """Drop the tables in dependency order."""
    op.drop_table("post")
    op.drop_index("ix_chatsession_user_id", table_name="chatsession")
    op.drop_table("chatsession")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
