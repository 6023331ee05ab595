"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from feed.domain.error import AuthorizationError, NotFoundError
from feed.domain.model import Post
from feed.domain.repository import PostRepository
from feed.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post lifecycle operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        text: str,
        name: str,
        avatar: str | None,
        author_id: UserId,
    ) -> Post:
        """Create a post owned by ``author_id``.

        Args:
            text: Post text
            name: Author display name
            avatar: Author avatar reference
            author_id: Authenticated caller, becomes the owner

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            post = Post(
                id=PostId(uuid4()),
                text=text,
                name=name,
                avatar=avatar,
                author_id=author_id,
                created_at=datetime.now(),
                likes=[],
                comments=[],
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created", post_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID, failing if it does not exist.

        Raises:
            NotFoundError: If no post has ``post_id``
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Delete a post. Only its author may do this.

        Args:
            post_id: Post ID
            user_id: Authenticated caller

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the caller is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_post(post_id)

            if post.author_id != user_id:
                logfire.warn(
                    "Unauthorized post delete attempt",
                    post_id=str(post_id),
                    author_id=str(post.author_id),
                    user_id=str(user_id),
                )
                raise AuthorizationError("post", str(post_id), str(user_id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
