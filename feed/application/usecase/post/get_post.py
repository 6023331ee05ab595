"""Get post use case."""

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse, parse_post_id
from feed.domain.service import PostService


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Fetch a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.get_post(parse_post_id(request.post_id))
        return PostResponse.from_post(post)
