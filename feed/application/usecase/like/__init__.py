"""Like use cases."""

from .like_post import LikePostRequest, LikePostUseCase
from .unlike_post import UnlikePostRequest, UnlikePostUseCase

__all__ = [
    "LikePostRequest",
    "LikePostUseCase",
    "UnlikePostRequest",
    "UnlikePostUseCase",
]
