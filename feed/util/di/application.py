"""Application layer DI providers."""

from dishka import Scope, provide

from feed.application.usecase.auth import GetCurrentUserUseCase
from feed.application.usecase.comment import AddCommentUseCase, RemoveCommentUseCase
from feed.application.usecase.like import LikePostUseCase, UnlikePostUseCase
from feed.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from feed.domain.service import CommentService, JWTService, LikeService, PostService
from feed.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, like_service: LikeService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(
        self, like_service: LikeService
    ) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(like_service=like_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, comment_service: CommentService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(comment_service=comment_service)
