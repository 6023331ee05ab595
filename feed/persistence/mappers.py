"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than with SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from feed.domain.model import Comment, Like, Post
from feed.domain.value import CommentId, PostId, UserId


def _uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_like(doc: Dict[str, Any]) -> Like:
    """Convert an embedded like document to a Like."""
    return Like(user_id=UserId(_uuid(doc["user_id"])))


def row_to_comment(doc: Dict[str, Any]) -> Comment:
    """Convert an embedded comment document to a Comment."""
    return Comment(
        id=CommentId(_uuid(doc["id"])),
        text=doc["text"],
        name=doc["name"],
        avatar=doc.get("avatar"),
        created_at=doc["created_at"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        text=row["text"],
        name=row["name"],
        avatar=row.get("avatar"),
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
        likes=[row_to_like(doc) for doc in row.get("likes") or []],
        comments=[row_to_comment(doc) for doc in row.get("comments") or []],
    )


def like_to_doc(like: Like) -> Dict[str, Any]:
    """Convert a Like to its JSONB document."""
    return like.model_dump(mode="json")


def comment_to_doc(comment: Comment) -> Dict[str, Any]:
    """Convert a Comment to its JSONB document."""
    return comment.model_dump(mode="json")


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "text": post.text,
        "name": post.name,
        "avatar": post.avatar,
        "author_id": post.author_id,
        "created_at": post.created_at,
        "likes": [like_to_doc(like) for like in post.likes],
        "comments": [comment_to_doc(comment) for comment in post.comments],
    }
