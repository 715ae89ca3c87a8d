"""Unit tests for LikeService."""

import asyncio
from uuid import uuid4

import pytest

from devnovate.domain.error import NotFoundError
from devnovate.domain.repository import BlogRepository, LikeRepository
from devnovate.domain.service import LikeService
from devnovate.domain.value import BlogId, BlogStatus, UserId
from tests.conftest import make_blog
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes(self, unit_env):
        """First toggle creates the like and increments the counter."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        like_repo = await unit_env.get(LikeRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))
        user_id = UserId(uuid4())

        # Act
        result = await like_service.toggle_like(blog.id, user_id)

        # Assert
        assert result.liked is True
        assert result.likes == 1
        assert await like_repo.exists(blog.id, user_id)
        assert (await blog_repo.find_by_id(blog.id)).likes == 1

    @pytest.mark.asyncio
    async def test_second_toggle_unlikes(self, unit_env):
        """Toggling twice returns to the original state."""
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        like_repo = await unit_env.get(LikeRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))
        user_id = UserId(uuid4())

        await like_service.toggle_like(blog.id, user_id)
        result = await like_service.toggle_like(blog.id, user_id)

        assert result.liked is False
        assert result.likes == 0
        assert not await like_repo.exists(blog.id, user_id)

    @pytest.mark.asyncio
    async def test_counter_matches_like_facts(self, unit_env):
        """Blog.likes equals the number of Like facts after mixed toggles."""
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        like_repo = await unit_env.get(LikeRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))
        users = [UserId(uuid4()) for _ in range(5)]

        for user_id in users:
            await like_service.toggle_like(blog.id, user_id)
        # Two of them change their minds
        await like_service.toggle_like(blog.id, users[0])
        await like_service.toggle_like(blog.id, users[3])

        stored = await blog_repo.find_by_id(blog.id)
        assert stored.likes == 3
        assert stored.likes == await like_repo.count_by_blog(blog.id)

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_different_users(self, unit_env):
        """Concurrent likes from distinct users are all counted."""
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)
        like_repo = await unit_env.get(LikeRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        await asyncio.gather(
            *(like_service.toggle_like(blog.id, UserId(uuid4())) for _ in range(10))
        )

        stored = await blog_repo.find_by_id(blog.id)
        assert stored.likes == 10
        assert await like_repo.count_by_blog(blog.id) == 10

    @pytest.mark.asyncio
    async def test_like_allowed_on_unpublished_blog(self, unit_env):
        """Likes only require the blog to exist."""
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(
            make_blog(UserId(uuid4()), status=BlogStatus.PENDING)
        )

        result = await like_service.toggle_like(blog.id, UserId(uuid4()))

        assert result.liked is True

    @pytest.mark.asyncio
    async def test_toggle_on_missing_blog_raises(self, unit_env):
        """Toggling a like on a non-existent blog is NotFound."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError, match="Blog not found"):
            await like_service.toggle_like(BlogId(uuid4()), UserId(uuid4()))


class TestHasLiked:
    """Tests for has_liked."""

    @pytest.mark.asyncio
    async def test_has_liked_reflects_toggle(self, unit_env):
        like_service = await unit_env.get(LikeService)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4())))
        user_id = UserId(uuid4())

        assert not await like_service.has_liked(blog.id, user_id)
        await like_service.toggle_like(blog.id, user_id)
        assert await like_service.has_liked(blog.id, user_id)
