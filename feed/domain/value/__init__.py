"""Domain value objects for the feed service."""

from feed.domain.value.common import ValueObject
from feed.domain.value.identifiers import CommentId, PostId, UserId

__all__ = [
    "ValueObject",
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
]
