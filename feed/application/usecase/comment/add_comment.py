"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse, parse_post_id
from feed.domain.service import CommentService
from feed.domain.value import UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    text: str
    name: str
    avatar: str | None = None
    author_id: str  # User ID from authenticated user


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> PostResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The post with the new comment first in ``comments``

        Raises:
            NotFoundError: If post not found
        """
        post = await self.comment_service.add_comment(
            post_id=parse_post_id(request.post_id),
            text=request.text,
            name=request.name,
            author_id=UserId(UUID(request.author_id)),
            avatar=request.avatar,
        )
        return PostResponse.from_post(post)
