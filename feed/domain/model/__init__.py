"""Domain model entities for the feed service."""

from feed.domain.model.comment import Comment
from feed.domain.model.like import Like
from feed.domain.model.post import Post

__all__ = [
    "Post",
    "Like",
    "Comment",
]
