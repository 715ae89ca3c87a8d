"""Unit tests for comment use cases."""

from uuid import uuid4

import pytest

from devnovate.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from devnovate.domain.error import NotFoundError, ValidationError
from devnovate.domain.repository import BlogRepository, UserRepository
from devnovate.domain.value import UserId
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_snapshot(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        user_repo = await unit_env.get(UserRepository)

        commenter = await user_repo.save(make_user("Margaret", email="mh@example.com"))
        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        response = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), author_id=str(commenter.id), content="Nice post"
            )
        )

        assert response.blog_id == str(blog.id)
        assert response.author_display_name == "Margaret"
        assert response.author_email == "mh@example.com"
        assert response.content == "Nice post"
        assert (await blog_repo.find_by_id(blog.id)).comments == 1

    @pytest.mark.asyncio
    async def test_blank_comment(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        user_repo = await unit_env.get(UserRepository)

        commenter = await user_repo.save(make_user())
        blog = await blog_repo.save(make_blog(UserId(uuid4())))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), author_id=str(commenter.id), content="   "
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_comments_with_total(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        user_repo = await unit_env.get(UserRepository)

        commenter = await user_repo.save(make_user())
        blog = await blog_repo.save(make_blog(UserId(uuid4())))
        for text in ["first", "second"]:
            await create.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), author_id=str(commenter.id), content=text
                )
            )

        response = await get_comments.execute(GetCommentsRequest(blog_id=str(blog.id)))

        assert response.total == 2
        assert [c.content for c in response.comments] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_missing_blog(self, unit_env):
        get_comments = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await get_comments.execute(GetCommentsRequest(blog_id=str(uuid4())))
