"""List tags use case."""

from pydantic import BaseModel

from devnovate.domain.repository import TagCount
from devnovate.domain.service import BlogService

TAG_LIMIT = 50


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagCount]


class ListTagsUseCase:
    """Use case for the tag cloud of published blogs."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self) -> ListTagsResponse:
        tags = await self.blog_service.popular_tags(limit=TAG_LIMIT)
        return ListTagsResponse(tags=tags)
