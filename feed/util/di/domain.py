"""Domain layer DI providers."""

from dishka import Scope, provide

from feed.config import AuthSettings
from feed.domain.repository import PostRepository
from feed.domain.service import CommentService, JWTService, LikeService, PostService
from feed.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle. Each request gets fresh services bound to its own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_like_service(
        self, post_repository: PostRepository, post_service: PostService
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(post_repository=post_repository, post_service=post_service)

    @provide
    def get_comment_service(
        self, post_repository: PostRepository, post_service: PostService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            post_repository=post_repository, post_service=post_service
        )
