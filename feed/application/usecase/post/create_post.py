"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse
from feed.domain.service import PostService
from feed.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    text: str
    name: str
    avatar: str | None = None
    author_id: str  # User ID from authenticated user


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post
        """
        post = await self.post_service.create_post(
            text=request.text,
            name=request.name,
            avatar=request.avatar,
            author_id=UserId(UUID(request.author_id)),
        )
        return PostResponse.from_post(post)
