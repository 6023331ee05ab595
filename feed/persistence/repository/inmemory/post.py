"""In-memory post repository for testing and local runs."""

from typing import Optional

from feed.domain.model import Comment, Post
from feed.domain.repository.post import PostRepository
from feed.domain.value import CommentId, PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository.

    Each conditional update checks and writes without awaiting in between,
    so it cannot interleave with another coroutine on the same loop.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save or replace a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def add_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Prepend a like unless one by the user already exists."""
        post = self._posts.get(post_id)
        if post is None or post.is_liked_by(user_id):
            return None
        updated = post.with_like(user_id)
        self._posts[post_id] = updated
        return updated

    async def remove_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Remove the first like by the user."""
        post = self._posts.get(post_id)
        if post is None or not post.is_liked_by(user_id):
            return None
        updated = post.without_like(user_id)
        self._posts[post_id] = updated
        return updated

    async def add_comment(self, post_id: PostId, comment: Comment) -> Optional[Post]:
        """Prepend a comment."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.with_comment(comment)
        self._posts[post_id] = updated
        return updated

    async def remove_comment(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Post]:
        """Remove the first comment with the given ID."""
        post = self._posts.get(post_id)
        if post is None or post.find_comment(comment_id) is None:
            return None
        updated = post.without_comment(comment_id)
        self._posts[post_id] = updated
        return updated
