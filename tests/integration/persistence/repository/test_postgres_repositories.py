"""Integration tests for the PostgreSQL repositories.

Run against a migrated database:

    DATABASE__URL=postgresql+asyncpg://... DEVNOVATE_INTEGRATION=1 pytest tests/integration
"""

import os
from uuid import uuid4

import pytest

from devnovate.domain.model import Comment
from devnovate.domain.repository import (
    BlogRepository,
    CommentRepository,
    LikeRepository,
    UserRepository,
)
from devnovate.domain.value import BlogStatus, CommentId
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("DEVNOVATE_INTEGRATION"), reason="needs a migrated postgres"
    ),
]

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresRepositories:
    """Counters and facts stay paired in the database."""

    @pytest.mark.asyncio
    async def test_like_toggle_pairs_fact_and_counter(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)
        like_repo = await integration_env.get(LikeRepository)

        author = await user_repo.save(make_user("Author"))
        reader = await user_repo.save(make_user("Reader"))
        blog = await blog_repo.save(make_blog(author.id))

        liked = await like_repo.toggle(blog.id, reader.id)
        assert (liked.liked, liked.likes) == (True, 1)
        assert await like_repo.count_by_blog(blog.id) == 1

        unliked = await like_repo.toggle(blog.id, reader.id)
        assert (unliked.liked, unliked.likes) == (False, 0)
        assert (await blog_repo.find_by_id(blog.id)).likes == 0

    @pytest.mark.asyncio
    async def test_comment_add_increments_counter(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)
        comment_repo = await integration_env.get(CommentRepository)

        author = await user_repo.save(make_user("Author"))
        blog = await blog_repo.save(make_blog(author.id))

        await comment_repo.add(
            Comment(
                id=CommentId(uuid4()),
                blog_id=blog.id,
                author_id=author.id,
                author=author.snapshot(),
                content="Stored",
            )
        )

        assert (await blog_repo.find_by_id(blog.id)).comments == 1
        assert await comment_repo.count_by_blog(blog.id) == 1

    @pytest.mark.asyncio
    async def test_status_compare_and_set(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)

        author = await user_repo.save(make_user("Author"))
        blog = await blog_repo.save(make_blog(author.id, status=BlogStatus.PENDING))

        first = await blog_repo.transition_status(
            blog.id, expected=BlogStatus.PENDING, new_status=BlogStatus.PUBLISHED
        )
        second = await blog_repo.transition_status(
            blog.id,
            expected=BlogStatus.PENDING,
            new_status=BlogStatus.REJECTED,
            rejection_reason="late",
        )

        assert first.status == BlogStatus.PUBLISHED
        assert second is None

    @pytest.mark.asyncio
    async def test_views_increment(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)

        author = await user_repo.save(make_user("Author"))
        blog = await blog_repo.save(make_blog(author.id))

        for _ in range(3):
            await blog_repo.record_view(blog.id)

        assert (await blog_repo.find_by_id(blog.id)).views == 3
