"""Unlike post use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse, parse_post_id
from feed.domain.service import LikeService
from feed.domain.value import UserId


class UnlikePostRequest(BaseModel):
    """Unlike post request."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class UnlikePostUseCase(BaseUseCase):
    """Use case for removing a like from a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize unlike post use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: UnlikePostRequest) -> PostResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If post not found
            NotLikedError: If the user has not liked the post
        """
        post = await self.like_service.unlike_post(
            parse_post_id(request.post_id), UserId(UUID(request.user_id))
        )
        return PostResponse.from_post(post)
