"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import String, bindparam, delete, literal, select, text, update
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from feed.domain.model import Comment, Post
from feed.domain.repository.post import PostRepository
from feed.domain.value import CommentId, PostId, UserId
from feed.persistence.error import store_errors
from feed.persistence.mappers import comment_to_doc, post_to_dict, row_to_post
from feed.persistence.tables import posts_table

# Drop the first array element whose key matches, in one statement.
# jsonb - integer removes the element at that (zero-based) index.
_REMOVE_LIKE_SQL = """
UPDATE posts
SET likes = likes - (
    SELECT (e.idx - 1)::int
    FROM jsonb_array_elements(posts.likes) WITH ORDINALITY AS e(elem, idx)
    WHERE e.elem ->> 'user_id' = :user_id
    ORDER BY e.idx
    LIMIT 1
)
WHERE id = :post_id
  AND likes @> jsonb_build_array(jsonb_build_object('user_id', CAST(:user_id AS text)))
RETURNING *
"""

_REMOVE_COMMENT_SQL = """
UPDATE posts
SET comments = comments - (
    SELECT (e.idx - 1)::int
    FROM jsonb_array_elements(posts.comments) WITH ORDINALITY AS e(elem, idx)
    WHERE e.elem ->> 'id' = :comment_id
    ORDER BY e.idx
    LIMIT 1
)
WHERE id = :post_id
  AND comments @> jsonb_build_array(jsonb_build_object('id', CAST(:comment_id AS text)))
RETURNING *
"""


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Engagement updates are single ``UPDATE ... WHERE <condition> RETURNING``
    statements, so the membership check and the write cannot interleave
    with another request.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with store_errors("find_by_id"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()

            if not row:
                return None
            return row_to_post(row._asdict())

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        with logfire.span("post_repository.find_all"):
            with store_errors("find_all"):
                stmt = select(posts_table).order_by(posts_table.c.created_at.desc())
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_post(row._asdict()) for row in rows]

    async def save(self, post: Post) -> Post:
        """Insert the post, or replace the stored document if it exists."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            values = post_to_dict(post)
            stmt = pg_insert(posts_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            with store_errors("save"):
                await self.session.execute(stmt)
                await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            with store_errors("delete"):
                stmt = delete(posts_table).where(posts_table.c.id == post_id)
                await self.session.execute(stmt)
                await self.session.flush()

    async def add_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Prepend a like unless one by the user already exists."""
        like_doc = [{"user_id": str(user_id)}]
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(~posts_table.c.likes.contains(like_doc))
            .values(
                likes=literal(like_doc, type_=JSONB).op("||", return_type=JSONB)(
                    posts_table.c.likes
                )
            )
            .returning(*posts_table.c)
        )
        with logfire.span(
            "post_repository.add_like", post_id=str(post_id), user_id=str(user_id)
        ):
            return await self._execute_returning("add_like", stmt)

    async def remove_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Remove the first like by the user."""
        stmt = (
            text(_REMOVE_LIKE_SQL)
            .bindparams(
                bindparam("post_id", type_=UUID(as_uuid=True)),
                bindparam("user_id", type_=String),
            )
            .columns(*posts_table.c)
        )
        with logfire.span(
            "post_repository.remove_like", post_id=str(post_id), user_id=str(user_id)
        ):
            return await self._execute_returning(
                "remove_like", stmt, {"post_id": post_id, "user_id": str(user_id)}
            )

    async def add_comment(self, post_id: PostId, comment: Comment) -> Optional[Post]:
        """Prepend a comment."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                comments=literal(
                    [comment_to_doc(comment)], type_=JSONB
                ).op("||", return_type=JSONB)(posts_table.c.comments)
            )
            .returning(*posts_table.c)
        )
        with logfire.span(
            "post_repository.add_comment",
            post_id=str(post_id),
            comment_id=str(comment.id),
        ):
            return await self._execute_returning("add_comment", stmt)

    async def remove_comment(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Post]:
        """Remove the first comment with the given ID."""
        stmt = (
            text(_REMOVE_COMMENT_SQL)
            .bindparams(
                bindparam("post_id", type_=UUID(as_uuid=True)),
                bindparam("comment_id", type_=String),
            )
            .columns(*posts_table.c)
        )
        with logfire.span(
            "post_repository.remove_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
        ):
            return await self._execute_returning(
                "remove_comment",
                stmt,
                {"post_id": post_id, "comment_id": str(comment_id)},
            )

    async def _execute_returning(
        self, operation: str, stmt, params: dict | None = None
    ) -> Optional[Post]:
        """Run a conditional update and map the returned row, if any."""
        with store_errors(operation):
            result = await self.session.execute(stmt, params or {})
            row = result.fetchone()
            await self.session.flush()

        if not row:
            logfire.info("Conditional update matched no post", operation=operation)
            return None
        return row_to_post(row._asdict())
