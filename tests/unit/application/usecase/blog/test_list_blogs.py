"""Unit tests for ListBlogsUseCase and TrendingBlogsUseCase."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from devnovate.application.usecase.blog import (
    ListBlogsRequest,
    ListBlogsUseCase,
    ListTagsUseCase,
    TrendingBlogsRequest,
    TrendingBlogsUseCase,
)
from devnovate.domain.error import ValidationError
from devnovate.domain.repository import BlogRepository
from devnovate.domain.value import (
    BlogSortField,
    BlogStatus,
    TrendingAlgorithm,
    TrendingPeriod,
    UserId,
)
from tests.conftest import make_blog
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListBlogsUseCase:
    """Tests for ListBlogsUseCase."""

    @pytest.mark.asyncio
    async def test_pages(self, unit_env):
        use_case = await unit_env.get(ListBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        for _ in range(7):
            await blog_repo.save(make_blog(author))

        response = await use_case.execute(ListBlogsRequest(page=2, limit=3))

        assert response.total == 7
        assert response.pages == 3
        assert response.page == 2
        assert len(response.blogs) == 3

    @pytest.mark.asyncio
    async def test_filter_by_author_and_tag(self, unit_env):
        use_case = await unit_env.get(ListBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        mine = await blog_repo.save(make_blog(author, tags=["rust"]))
        await blog_repo.save(make_blog(author, tags=["go"]))
        await blog_repo.save(make_blog(UserId(uuid4()), tags=["rust"]))

        response = await use_case.execute(
            ListBlogsRequest(author_id=str(author), tag="Rust")
        )

        assert [b.blog_id for b in response.blogs] == [str(mine.id)]

    @pytest.mark.asyncio
    async def test_sort_by_popularity(self, unit_env):
        use_case = await unit_env.get(ListBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        a = await blog_repo.save(make_blog(author, likes=5, views=1))
        b = await blog_repo.save(make_blog(author, likes=5, views=10))
        c = await blog_repo.save(make_blog(author, likes=1, views=100))

        response = await use_case.execute(
            ListBlogsRequest(sort=BlogSortField.POPULARITY)
        )

        assert [x.blog_id for x in response.blogs] == [str(b.id), str(a.id), str(c.id)]

    @pytest.mark.asyncio
    async def test_invalid_tag_filter(self, unit_env):
        use_case = await unit_env.get(ListBlogsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListBlogsRequest(tag="not a tag"))


class TestTrendingAndTags:
    """Tests for TrendingBlogsUseCase and ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_trending_uses_configured_defaults(self, unit_env):
        use_case = await unit_env.get(TrendingBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(make_blog(UserId(uuid4()), likes=3))
        await blog_repo.save(make_blog(UserId(uuid4()), status=BlogStatus.PENDING))

        response = await use_case.execute(TrendingBlogsRequest())

        assert response.algorithm == TrendingAlgorithm.ENGAGEMENT
        assert response.period == TrendingPeriod.WEEK
        assert response.generated_at.tzinfo is not None
        assert [b.blog_id for b in response.blogs] == [str(blog.id)]

    @pytest.mark.asyncio
    async def test_trending_request_overrides_defaults(self, unit_env):
        use_case = await unit_env.get(TrendingBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)

        author = UserId(uuid4())
        old = await blog_repo.save(
            make_blog(author, likes=9, created_at=datetime.now() - timedelta(days=90))
        )
        for _ in range(3):
            await blog_repo.save(make_blog(author, likes=1))

        response = await use_case.execute(
            TrendingBlogsRequest(
                algorithm=TrendingAlgorithm.POPULARITY,
                period=TrendingPeriod.ALL,
                limit=2,
            )
        )

        assert response.algorithm == TrendingAlgorithm.POPULARITY
        assert response.period == TrendingPeriod.ALL
        assert len(response.blogs) == 2
        assert response.blogs[0].blog_id == str(old.id)

    @pytest.mark.asyncio
    async def test_tags(self, unit_env):
        use_case = await unit_env.get(ListTagsUseCase)
        blog_repo = await unit_env.get(BlogRepository)

        await blog_repo.save(make_blog(UserId(uuid4()), tags=["python", "web"]))

        response = await use_case.execute()

        assert {t.tag for t in response.tags} == {"python", "web"}
