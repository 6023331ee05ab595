"""Post routes.

Reads are public. Every mutation requires ``Authorization: Bearer <token>``
and is rejected with 401 before reaching the domain if the token is missing
or invalid. Domain errors are mapped to responses in
``feed.interface.api.errors``.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from feed.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from feed.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from feed.application.usecase.common import PostResponse
from feed.application.usecase.like import (
    LikePostRequest,
    LikePostUseCase,
    UnlikePostRequest,
    UnlikePostUseCase,
)
from feed.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    text: str = Field(min_length=1, max_length=10000)
    name: str = Field(min_length=1, max_length=255)
    avatar: str | None = None


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    text: str = Field(min_length=1, max_length=10000)
    name: str = Field(min_length=1, max_length=255)
    avatar: str | None = None


def _bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an Authorization header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def _require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
    action: str,
) -> GetCurrentUserResponse:
    """Resolve the caller or reject the request with 401.

    Raises:
        HTTPException: If no bearer token was sent
        InvalidCredentialError: If the token fails verification
    """
    token = _bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Create a new post owned by the caller.

    Requires authentication.
    """
    user = await _require_user(get_current_user_use_case, authorization, "create posts")
    return await create_post_use_case.execute(
        CreatePostRequest(
            text=request.text,
            name=request.name,
            avatar=request.avatar,
            author_id=user.user_id,
        )
    )


@router.get("", response_model=list[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List all posts, newest first."""
    result = await list_posts_use_case.execute(ListPostsRequest())
    return result.posts


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a single post with its likes and comments."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post.

    Requires authentication; only the author may delete.
    """
    user = await _require_user(get_current_user_use_case, authorization, "delete posts")
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user.user_id)
    )


@router.post("/{post_id}/like", response_model=PostResponse)
async def like_post(
    post_id: str,
    like_post_use_case: FromDishka[LikePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Like a post.

    Requires authentication. Liking twice returns 400.
    """
    user = await _require_user(get_current_user_use_case, authorization, "like posts")
    return await like_post_use_case.execute(
        LikePostRequest(post_id=post_id, user_id=user.user_id)
    )


@router.post("/{post_id}/unlike", response_model=PostResponse)
async def unlike_post(
    post_id: str,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Remove the caller's like from a post.

    Requires authentication. Unliking without a like returns 400.
    """
    user = await _require_user(get_current_user_use_case, authorization, "unlike posts")
    return await unlike_post_use_case.execute(
        UnlikePostRequest(post_id=post_id, user_id=user.user_id)
    )


@router.post("/{post_id}/comment", response_model=PostResponse)
async def add_comment(
    post_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Add a comment to a post.

    Requires authentication.
    """
    user = await _require_user(get_current_user_use_case, authorization, "comment")
    return await add_comment_use_case.execute(
        AddCommentRequest(
            post_id=post_id,
            text=request.text,
            name=request.name,
            avatar=request.avatar,
            author_id=user.user_id,
        )
    )


@router.delete("/{post_id}/comment/{comment_id}", response_model=PostResponse)
async def remove_comment(
    post_id: str,
    comment_id: str,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PostResponse:
    """Remove a comment from a post.

    Requires authentication. Any authenticated user may remove any comment.
    """
    user = await _require_user(
        get_current_user_use_case, authorization, "remove comments"
    )
    return await remove_comment_use_case.execute(
        RemoveCommentRequest(
            post_id=post_id, comment_id=comment_id, user_id=user.user_id
        )
    )
