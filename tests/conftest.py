"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from feed.config import AuthSettings, Settings
from feed.domain.model import Comment, Like, Post
from feed.domain.value import CommentId, PostId, UserId
from feed.util.jwt import create_token

# Same settings the DI container verifies against
TEST_AUTH = Settings().auth


def make_post(
    author_id: UserId | None = None,
    likes: list[UserId] | None = None,
    comments: list[Comment] | None = None,
    created_at: datetime | None = None,
    text: str = "Hello feed",
) -> Post:
    """Build a post for tests.

    Args:
        author_id: Owner (random if omitted)
        likes: User IDs with a like, in stored order
        comments: Embedded comments, in stored order
        created_at: Creation time (now if omitted)
        text: Post text
    """
    return Post(
        id=PostId(uuid4()),
        text=text,
        name="Author",
        avatar="avatar.png",
        author_id=author_id or UserId(uuid4()),
        created_at=created_at or datetime.now(),
        likes=[Like(user_id=user_id) for user_id in likes or []],
        comments=comments or [],
    )


def make_comment(text: str = "Nice post", minutes_ago: int = 0) -> Comment:
    """Build a comment for tests."""
    return Comment(
        id=CommentId(uuid4()),
        text=text,
        name="Commenter",
        avatar=None,
        created_at=datetime.now() - timedelta(minutes=minutes_ago),
    )


def make_token(
    user_id: UserId | str,
    name: str = "Tester",
    settings: AuthSettings = TEST_AUTH,
) -> str:
    """Issue a signed credential for ``user_id``."""
    return create_token(str(user_id), name, None, settings)
