"""Unit tests for LikeService."""

import asyncio
from uuid import uuid4

import pytest

from feed.domain.error import AlreadyLikedError, NotFoundError, NotLikedError
from feed.domain.model import Post
from feed.domain.repository import PostRepository
from feed.domain.service import LikeService, PostService
from feed.domain.value import PostId, UserId
from feed.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class StaleReadRepository(InMemoryPostRepository):
    """Returns the first snapshot read for each post.

    Simulates a request whose read happened before another request's write.
    """

    def __init__(self) -> None:
        super().__init__()
        self._snapshots: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId):
        if post_id not in self._snapshots:
            post = await super().find_by_id(post_id)
            if post is None:
                return None
            self._snapshots[post_id] = post
        return self._snapshots[post_id]


class TestLikePost:
    """Tests for like_post method."""

    @pytest.mark.asyncio
    async def test_like_post_prepends_like(self, unit_env):
        """Liking should put the new like at the front."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        earlier = UserId(uuid4())
        post = await post_repo.save(make_post(likes=[earlier]))
        user_id = UserId(uuid4())

        result = await like_service.like_post(post.id, user_id)

        assert [like.user_id for like in result.likes] == [user_id, earlier]
        stored = await post_repo.find_by_id(post.id)
        assert stored.likes == result.likes

    @pytest.mark.asyncio
    async def test_like_twice_raises_and_keeps_single_like(self, unit_env):
        """Second like by the same user should fail without a duplicate."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        await like_service.like_post(post.id, user_id)

        with pytest.raises(AlreadyLikedError):
            await like_service.like_post(post.id, user_id)

        stored = await post_repo.find_by_id(post.id)
        assert len(stored.likes) == 1

    @pytest.mark.asyncio
    async def test_like_nonexistent_post_raises_not_found(self, unit_env):
        """Liking a missing post should raise NotFoundError."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await like_service.like_post(PostId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_author_may_like_own_post(self, unit_env):
        """There is no self-like restriction."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        author_id = UserId(uuid4())
        post = await post_repo.save(make_post(author_id=author_id))

        result = await like_service.like_post(post.id, author_id)

        assert result.is_liked_by(author_id)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_likes_store_one_like(self, unit_env):
        """Two simultaneous likes by one user should leave exactly one like."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        results = await asyncio.gather(
            like_service.like_post(post.id, user_id),
            like_service.like_post(post.id, user_id),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, Exception)]
        assert len(errors) == 1
        assert isinstance(errors[0], AlreadyLikedError)
        stored = await post_repo.find_by_id(post.id)
        assert len(stored.likes) == 1

    @pytest.mark.asyncio
    async def test_like_after_stale_read_is_rejected_by_store(self):
        """A like based on a stale read should fail at the store update."""
        repo = StaleReadRepository()
        like_service = LikeService(repo, PostService(repo))

        post = await repo.save(make_post())
        user_id = UserId(uuid4())

        # Snapshot taken before the like
        await repo.find_by_id(post.id)
        await InMemoryPostRepository.add_like(repo, post.id, user_id)

        with pytest.raises(AlreadyLikedError):
            await like_service.like_post(post.id, user_id)

        stored = await InMemoryPostRepository.find_by_id(repo, post.id)
        assert len(stored.likes) == 1


class TestUnlikePost:
    """Tests for unlike_post method."""

    @pytest.mark.asyncio
    async def test_unlike_removes_like(self, unit_env):
        """Unliking should remove the caller's like."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        user_id = UserId(uuid4())
        other = UserId(uuid4())
        post = await post_repo.save(make_post(likes=[user_id, other]))

        result = await like_service.unlike_post(post.id, user_id)

        assert [like.user_id for like in result.likes] == [other]

    @pytest.mark.asyncio
    async def test_unlike_without_like_raises(self, unit_env):
        """Unliking a post the user never liked should raise NotLikedError."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post(likes=[UserId(uuid4())]))

        with pytest.raises(NotLikedError):
            await like_service.unlike_post(post.id, UserId(uuid4()))

        stored = await post_repo.find_by_id(post.id)
        assert len(stored.likes) == 1

    @pytest.mark.asyncio
    async def test_unlike_removes_only_first_duplicate(self, unit_env):
        """Legacy duplicate likes should lose one entry per unlike."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        user_id = UserId(uuid4())
        other = UserId(uuid4())
        post = await post_repo.save(make_post(likes=[user_id, other, user_id]))

        result = await like_service.unlike_post(post.id, user_id)

        assert [like.user_id for like in result.likes] == [other, user_id]

    @pytest.mark.asyncio
    async def test_unlike_nonexistent_post_raises_not_found(self, unit_env):
        """Unliking a missing post should raise NotFoundError."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.unlike_post(PostId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_like_unlike_like_roundtrip(self, unit_env):
        """A user can like again after unliking."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        await like_service.like_post(post.id, user_id)
        await like_service.unlike_post(post.id, user_id)
        result = await like_service.like_post(post.id, user_id)

        assert [like.user_id for like in result.likes] == [user_id]


@pytest.mark.asyncio
async def test_create_like_unlike_scenario(unit_env):
    """u1 posts, u2 likes then unlikes; a second unlike fails."""
    post_service = await unit_env.get(PostService)
    like_service = await unit_env.get(LikeService)
    u1 = UserId(uuid4())
    u2 = UserId(uuid4())

    post = await post_service.create_post("Hi", "u1", None, u1)

    liked = await like_service.like_post(post.id, u2)
    assert [like.user_id for like in liked.likes] == [u2]

    unliked = await like_service.unlike_post(post.id, u2)
    assert unliked.likes == []

    with pytest.raises(NotLikedError):
        await like_service.unlike_post(post.id, u2)
