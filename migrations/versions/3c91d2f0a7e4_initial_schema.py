"""initial_schema

Create the posts document table:
- Posts with embedded likes and comments (JSONB arrays, newest first)

Revision ID: 3c91d2f0a7e4
Revises:
Create Date: 2026-10-19 10:12:04.511203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c91d2f0a7e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "likes",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "comments",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
