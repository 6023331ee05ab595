"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from feed.domain.model import Comment, Post
from feed.domain.value import CommentId, PostId, UserId


class PostRepository(ABC):
    """Document store for the Post aggregate.

    Besides plain find/save/delete, the store exposes conditional
    engagement updates. Each one checks its condition and applies the
    change in a single storage operation, so two concurrent callers can
    never both pass the same check. They return the updated post, or
    None when the post is missing or the condition did not hold.

    Implementations live in the persistence layer and raise
    StoreUnavailableError when the backing store fails.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first.

        Returns:
            List of posts sorted by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or replace the whole document).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def add_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Prepend a like unless the user already liked the post.

        Args:
            post_id: The post ID
            user_id: The liking user

        Returns:
            Updated post, or None if the post is missing or already liked
        """
        pass

    @abstractmethod
    async def remove_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Remove the first like by the user, if one exists.

        Args:
            post_id: The post ID
            user_id: The user whose like is removed

        Returns:
            Updated post, or None if the post is missing or not liked
        """
        pass

    @abstractmethod
    async def add_comment(self, post_id: PostId, comment: Comment) -> Optional[Post]:
        """Prepend a comment to the post.

        Args:
            post_id: The post ID
            comment: The new comment

        Returns:
            Updated post, or None if the post is missing
        """
        pass

    @abstractmethod
    async def remove_comment(
        self, post_id: PostId, comment_id: CommentId
    ) -> Optional[Post]:
        """Remove the first comment with the given ID.

        Args:
            post_id: The post ID
            comment_id: The comment ID

        Returns:
            Updated post, or None if the post or comment is missing
        """
        pass
