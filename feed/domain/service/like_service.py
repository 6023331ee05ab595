"""Like domain service."""

import logfire

from feed.domain.error import AlreadyLikedError, NotFoundError, NotLikedError
from feed.domain.model import Post
from feed.domain.repository import PostRepository
from feed.domain.value import PostId, UserId

from .base import Service
from .post_service import PostService


class LikeService(Service):
    """Domain service for liking and unliking posts.

    Each user can like a post at most once. Repeated likes and unlikes
    without a like are rejected rather than ignored.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> None:
        """Initialize like service.

        Args:
            post_repository: Post repository
            post_service: Post domain service
        """
        self.post_repository = post_repository
        self.post_service = post_service

    async def like_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Like a post.

        The membership check is repeated inside the store update, so a
        concurrent duplicate like fails instead of adding a second entry.

        Args:
            post_id: Post ID
            user_id: Liking user ID

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If user already liked the post
        """
        with logfire.span("like_post", post_id=str(post_id), user_id=str(user_id)):
            post = await self.post_service.get_post(post_id)

            if post.is_liked_by(user_id):
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise AlreadyLikedError(str(post_id), str(user_id))

            updated = await self.post_repository.add_like(post_id, user_id)
            if updated is None:
                # Lost a race: the post vanished or another request liked it
                await self.post_service.get_post(post_id)
                logfire.warn(
                    "Concurrent duplicate like rejected",
                    user_id=str(user_id),
                    post_id=str(post_id),
                )
                raise AlreadyLikedError(str(post_id), str(user_id))

            logfire.info(
                "Post liked",
                post_id=str(post_id),
                user_id=str(user_id),
                like_count=len(updated.likes),
            )
            return updated

    async def unlike_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Remove a user's like from a post.

        Only the first matching like is removed.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            NotLikedError: If user has not liked the post
        """
        with logfire.span("unlike_post", post_id=str(post_id), user_id=str(user_id)):
            post = await self.post_service.get_post(post_id)

            if not post.is_liked_by(user_id):
                logfire.info(
                    "No like to remove from post",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotLikedError(str(post_id), str(user_id))

            updated = await self.post_repository.remove_like(post_id, user_id)
            if updated is None:
                await self.post_service.get_post(post_id)
                raise NotLikedError(str(post_id), str(user_id))

            logfire.info(
                "Like removed from post",
                post_id=str(post_id),
                user_id=str(user_id),
                like_count=len(updated.likes),
            )
            return updated
