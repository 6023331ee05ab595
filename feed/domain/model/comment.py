"""Comment value object.

Comments are embedded in their post's document and are only ever added
or removed through the post aggregate.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from feed.domain.value import CommentId, ValueObject


class Comment(ValueObject):
    """Comment embedded in ``Post.comments``.

    Created on submission, destroyed by id, never updated in place.
    """

    id: CommentId
    text: str = Field(min_length=1, max_length=10000)
    name: str
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
