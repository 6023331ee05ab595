"""Post aggregate root.

A post owns its likes and comments as embedded documents. Any change to
either collection is a change to the post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from feed.domain.model.comment import Comment
from feed.domain.model.common import DomainModel
from feed.domain.model.like import Like
from feed.domain.value import CommentId, PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - ``likes`` holds at most one entry per user (guarded by the engine and
      the conditional store updates, not by validation, so documents that
      already hold duplicates still load)
    - ``comments`` is ordered most-recent-first
    - ``author_id`` is fixed at creation
    """

    id: PostId
    text: str = Field(min_length=1, max_length=10000)
    name: str
    avatar: Optional[str] = None
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether ``user_id`` has a like on this post."""
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Return the first comment with ``comment_id``, if any."""
        return next((c for c in self.comments if c.id == comment_id), None)

    def with_like(self, user_id: UserId) -> "Post":
        """Copy of this post with a like from ``user_id`` prepended."""
        return self.model_copy(update={"likes": [Like(user_id=user_id), *self.likes]})

    def without_like(self, user_id: UserId) -> "Post":
        """Copy of this post with the first like from ``user_id`` removed."""
        likes = list(self.likes)
        for index, like in enumerate(likes):
            if like.user_id == user_id:
                del likes[index]
                break
        return self.model_copy(update={"likes": likes})

    def with_comment(self, comment: Comment) -> "Post":
        """Copy of this post with ``comment`` prepended."""
        return self.model_copy(update={"comments": [comment, *self.comments]})

    def without_comment(self, comment_id: CommentId) -> "Post":
        """Copy of this post with the first comment matching ``comment_id`` removed."""
        comments = list(self.comments)
        for index, comment in enumerate(comments):
            if comment.id == comment_id:
                del comments[index]
                break
        return self.model_copy(update={"comments": comments})
