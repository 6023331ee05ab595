"""Remove comment use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.common import PostResponse, parse_post_id
from feed.domain.error import CommentNotFoundError
from feed.domain.service import CommentService
from feed.domain.value import CommentId, UserId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveCommentUseCase(BaseUseCase):
    """Use case for removing a comment from a post."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: RemoveCommentRequest) -> PostResponse:
        """Execute remove comment flow.

        Raises:
            NotFoundError: If post not found
            CommentNotFoundError: If the comment does not exist on the post
        """
        post_id = parse_post_id(request.post_id)
        try:
            comment_id = CommentId(UUID(request.comment_id))
        except ValueError:
            # A missing post is reported before the comment
            await self.comment_service.post_service.get_post(post_id)
            raise CommentNotFoundError(str(post_id), request.comment_id)

        post = await self.comment_service.remove_comment(
            post_id=post_id,
            comment_id=comment_id,
            user_id=UserId(UUID(request.user_id)),
        )
        return PostResponse.from_post(post)
