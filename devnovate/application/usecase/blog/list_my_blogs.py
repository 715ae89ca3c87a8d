"""List my blogs use case."""

from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.service import BlogService
from devnovate.domain.value import UserId

from .models import BlogSummary


class ListMyBlogsRequest(BaseModel):
    """List my blogs request."""

    user_id: str


class ListMyBlogsResponse(BaseModel):
    """List my blogs response."""

    blogs: list[BlogSummary]


class ListMyBlogsUseCase:
    """Use case for the author's dashboard: every own blog, any status."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: ListMyBlogsRequest) -> ListMyBlogsResponse:
        blogs = await self.blog_service.list_by_author(UserId(UUID(request.user_id)))
        return ListMyBlogsResponse(blogs=[BlogSummary.from_blog(b) for b in blogs])
