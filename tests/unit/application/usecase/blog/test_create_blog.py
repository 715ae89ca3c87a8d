"""Unit tests for CreateBlogUseCase."""

from uuid import uuid4

import pytest

from devnovate.application.usecase.blog import CreateBlogRequest, CreateBlogUseCase
from devnovate.domain.error import ValidationError
from devnovate.domain.value import BlogStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateBlogUseCase:
    """Tests for CreateBlogUseCase."""

    @pytest.mark.asyncio
    async def test_create_blog(self, unit_env):
        use_case = await unit_env.get(CreateBlogUseCase)
        author_id = str(uuid4())

        response = await use_case.execute(
            CreateBlogRequest(
                author_id=author_id,
                title="Profiling Python",
                content="Use py-spy and cProfile.",
                tags=["Python", "performance"],
            )
        )

        assert response.author_id == author_id
        assert response.status == BlogStatus.PENDING
        assert response.tags == ["python", "performance"]
        assert response.content == "Use py-spy and cProfile."
        assert response.excerpt == "Use py-spy and cProfile."

    @pytest.mark.asyncio
    async def test_malformed_tag_rejected(self, unit_env):
        use_case = await unit_env.get(CreateBlogUseCase)

        with pytest.raises(ValidationError, match="Invalid tag"):
            await use_case.execute(
                CreateBlogRequest(
                    author_id=str(uuid4()),
                    title="Bad tags",
                    content="Body",
                    tags=["no spaces allowed"],
                )
            )
