"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import parse_post_id
from feed.domain.service import PostService
from feed.domain.value import UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Returns:
            Success flag

        Raises:
            NotFoundError: If post not found
            AuthorizationError: If user doesn't own the post
        """
        await self.post_service.delete_post(
            parse_post_id(request.post_id), UserId(UUID(request.user_id))
        )
        return DeletePostResponse(success=True)
