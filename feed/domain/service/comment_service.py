"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from feed.domain.error import CommentNotFoundError
from feed.domain.model import Comment, Post
from feed.domain.repository import PostRepository
from feed.domain.value import CommentId, PostId, UserId

from .base import Service
from .post_service import PostService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> None:
        """Initialize comment service.

        Args:
            post_repository: Post repository
            post_service: Post domain service
        """
        self.post_repository = post_repository
        self.post_service = post_service

    async def add_comment(
        self,
        post_id: PostId,
        text: str,
        name: str,
        author_id: UserId,
        avatar: str | None = None,
    ) -> Post:
        """Add a comment to the front of a post's comments.

        Any authenticated user may comment.

        Args:
            post_id: Post ID
            text: Comment text
            name: Commenter display name
            author_id: Authenticated caller
            avatar: Commenter avatar reference

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            await self.post_service.get_post(post_id)

            comment = Comment(
                id=CommentId(uuid4()),
                text=text,
                name=name,
                avatar=avatar,
                created_at=datetime.now(),
            )

            updated = await self.post_repository.add_comment(post_id, comment)
            if updated is None:
                # Deleted between the read and the write
                await self.post_service.get_post(post_id)
                raise RuntimeError(f"Comment was not stored on post {post_id}")

            logfire.info(
                "Comment added",
                comment_id=str(comment.id),
                post_id=str(post_id),
                comment_count=len(updated.comments),
            )
            return updated

    async def remove_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        user_id: UserId,
    ) -> Post:
        """Remove a comment from a post.

        There is no authorship check: any authenticated caller who knows the
        comment ID can remove it. Removals by someone other than the post
        author are logged so the behavior stays visible.

        Args:
            post_id: Post ID
            comment_id: Comment ID
            user_id: Authenticated caller

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            CommentNotFoundError: If no comment has ``comment_id``
        """
        with logfire.span(
            "comment_service.remove_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            post = await self.post_service.get_post(post_id)

            if post.find_comment(comment_id) is None:
                logfire.warn(
                    "Comment does not exist",
                    post_id=str(post_id),
                    comment_id=str(comment_id),
                )
                raise CommentNotFoundError(str(post_id), str(comment_id))

            if post.author_id != user_id:
                logfire.warn(
                    "Comment removed by non-author of post",
                    post_id=str(post_id),
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )

            updated = await self.post_repository.remove_comment(post_id, comment_id)
            if updated is None:
                await self.post_service.get_post(post_id)
                raise CommentNotFoundError(str(post_id), str(comment_id))

            logfire.info(
                "Comment removed",
                post_id=str(post_id),
                comment_id=str(comment_id),
                comment_count=len(updated.comments),
            )
            return updated
