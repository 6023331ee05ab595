"""Response models and id parsing shared by the post, like and comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from feed.domain.error import NotFoundError
from feed.domain.model import Post
from feed.domain.value import PostId


class LikeResponse(BaseModel):
    """A like on a post."""

    user_id: str


class CommentResponse(BaseModel):
    """A comment on a post."""

    id: str
    text: str
    name: str
    avatar: str | None
    created_at: datetime


class PostResponse(BaseModel):
    """Wire shape of a post with its likes and comments."""

    id: str
    text: str
    name: str
    avatar: str | None
    author_id: str
    created_at: datetime
    likes: list[LikeResponse]
    comments: list[CommentResponse]

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        """Build the response from a Post aggregate."""
        return cls(
            id=str(post.id),
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            author_id=str(post.author_id),
            created_at=post.created_at,
            likes=[LikeResponse(user_id=str(like.user_id)) for like in post.likes],
            comments=[
                CommentResponse(
                    id=str(comment.id),
                    text=comment.text,
                    name=comment.name,
                    avatar=comment.avatar,
                    created_at=comment.created_at,
                )
                for comment in post.comments
            ],
        )


def parse_post_id(post_id: str) -> PostId:
    """Parse a post id taken from a request.

    An id that is not a UUID names no post.

    Raises:
        NotFoundError: If ``post_id`` is not a valid UUID
    """
    try:
        return PostId(UUID(post_id))
    except ValueError:
        raise NotFoundError("Post", post_id)
