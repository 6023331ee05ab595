"""Unit tests for AddCommentUseCase and RemoveCommentUseCase."""

from uuid import uuid4

import pytest

from feed.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from feed.domain.error import CommentNotFoundError, NotFoundError
from feed.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_add_then_remove_comment(unit_env):
    """A comment added through the use case can be removed by its id."""
    add_use_case = await unit_env.get(AddCommentUseCase)
    remove_use_case = await unit_env.get(RemoveCommentUseCase)
    post_repo = await unit_env.get(PostRepository)
    post = await post_repo.save(make_post())
    user_id = str(uuid4())

    added = await add_use_case.execute(
        AddCommentRequest(
            post_id=str(post.id),
            text="Great write-up",
            name="Bob",
            avatar="bob.png",
            author_id=user_id,
        )
    )

    assert len(added.comments) == 1
    comment = added.comments[0]
    assert comment.text == "Great write-up"
    assert comment.avatar == "bob.png"

    removed = await remove_use_case.execute(
        RemoveCommentRequest(
            post_id=str(post.id), comment_id=comment.id, user_id=user_id
        )
    )

    assert removed.comments == []


@pytest.mark.asyncio
async def test_remove_unknown_comment_raises(unit_env):
    """Unknown comment ids surface CommentNotFoundError."""
    remove_use_case = await unit_env.get(RemoveCommentUseCase)
    post_repo = await unit_env.get(PostRepository)
    post = await post_repo.save(make_post())

    with pytest.raises(CommentNotFoundError):
        await remove_use_case.execute(
            RemoveCommentRequest(
                post_id=str(post.id), comment_id=str(uuid4()), user_id=str(uuid4())
            )
        )


@pytest.mark.asyncio
async def test_malformed_comment_id_raises_comment_not_found(unit_env):
    """A non-UUID comment id matches no comment and leaves the post alone."""
    remove_use_case = await unit_env.get(RemoveCommentUseCase)
    post_repo = await unit_env.get(PostRepository)
    post = await post_repo.save(make_post())

    with pytest.raises(CommentNotFoundError):
        await remove_use_case.execute(
            RemoveCommentRequest(
                post_id=str(post.id), comment_id="not-a-comment", user_id=str(uuid4())
            )
        )

    assert await post_repo.find_by_id(post.id) == post


@pytest.mark.asyncio
async def test_malformed_comment_id_on_missing_post_raises_not_found(unit_env):
    remove_use_case = await unit_env.get(RemoveCommentUseCase)

    with pytest.raises(NotFoundError):
        await remove_use_case.execute(
            RemoveCommentRequest(
                post_id=str(uuid4()), comment_id="not-a-comment", user_id=str(uuid4())
            )
        )


@pytest.mark.asyncio
async def test_add_comment_to_malformed_post_id_raises_not_found(unit_env):
    add_use_case = await unit_env.get(AddCommentUseCase)

    with pytest.raises(NotFoundError):
        await add_use_case.execute(
            AddCommentRequest(
                post_id="abc", text="Hi", name="Bob", author_id=str(uuid4())
            )
        )
