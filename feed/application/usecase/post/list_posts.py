"""List posts use case."""

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse
from feed.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    pass


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostResponse]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing all posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts = await self.post_service.list_posts()
        return ListPostsResponse(posts=[PostResponse.from_post(p) for p in posts])
