"""List blogs use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from devnovate.domain.error import ValidationError
from devnovate.domain.repository import BlogQuery
from devnovate.domain.service import BlogService
from devnovate.domain.value import BlogSortField, BlogStatus, SortOrder, Tag, UserId

from .models import BlogSummary


class ListBlogsRequest(BaseModel):
    """List blogs request."""

    status: BlogStatus | None = BlogStatus.PUBLISHED  # None for every status
    tag: str | None = None
    author_id: str | None = None
    search: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    sort: BlogSortField = BlogSortField.CREATED_AT
    order: SortOrder = SortOrder.DESC
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListBlogsResponse(BaseModel):
    """List blogs response."""

    blogs: list[BlogSummary]
    total: int
    page: int
    limit: int
    pages: int


class ListBlogsUseCase:
    """Use case for browsing blogs with filters, sorting and pagination."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        """Execute list blogs flow.

        Args:
            request: Filters, sorting and pagination

        Returns:
            Page of blog summaries with totals

        Raises:
            ValidationError: If the tag filter is malformed
        """
        try:
            tag = Tag(request.tag) if request.tag else None
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid tag: {request.tag}") from e

        query = BlogQuery(
            status=request.status,
            tag=tag,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
            search=request.search.strip() if request.search else None,
            date_from=request.date_from,
            date_to=request.date_to,
            sort=request.sort,
            order=request.order,
        )

        blogs, total = await self.blog_service.list_blogs(
            query,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )

        return ListBlogsResponse(
            blogs=[BlogSummary.from_blog(b) for b in blogs],
            total=total,
            page=request.page,
            limit=request.limit,
            pages=(total + request.limit - 1) // request.limit,
        )
