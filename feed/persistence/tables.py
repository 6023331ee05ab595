"""SQLAlchemy table definitions for the feed service.

Posts are stored as documents: one row per post, with likes and comments
embedded as JSONB arrays. Keep in sync with the Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    # [{"user_id": "<uuid>"}, ...], newest first
    Column("likes", JSONB, nullable=False, server_default="[]"),
    # [{"id", "text", "name", "avatar", "created_at"}, ...], newest first
    Column("comments", JSONB, nullable=False, server_default="[]"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
