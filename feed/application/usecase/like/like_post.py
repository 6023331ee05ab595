"""Like post use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse, parse_post_id
from feed.domain.service import LikeService
from feed.domain.value import UserId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like post use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikePostRequest) -> PostResponse:
        """Execute like flow.

        Args:
            request: Like post request

        Returns:
            The post with the new like first in ``likes``

        Raises:
            NotFoundError: If post not found
            AlreadyLikedError: If already liked by this user
        """
        post = await self.like_service.like_post(
            parse_post_id(request.post_id), UserId(UUID(request.user_id))
        )
        return PostResponse.from_post(post)
