"""List moderation queue use case."""

from pydantic import BaseModel, Field

from devnovate.application.usecase.blog.models import BlogSummary
from devnovate.domain.error import ForbiddenError
from devnovate.domain.repository import BlogQuery
from devnovate.domain.service import BlogService
from devnovate.domain.value import BlogStatus, UserRole


class ListModerationQueueRequest(BaseModel):
    """List moderation queue request."""

    actor_id: str
    actor_role: UserRole = UserRole.USER
    status: BlogStatus | None = None  # None for every status
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListModerationQueueResponse(BaseModel):
    """List moderation queue response."""

    blogs: list[BlogSummary]
    total: int
    page: int
    limit: int


class ListModerationQueueUseCase:
    """Use case for the moderator dashboard listing."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(
        self, request: ListModerationQueueRequest
    ) -> ListModerationQueueResponse:
        """List blogs for moderation, newest first.

        Raises:
            ForbiddenError: If the actor isn't a moderator
        """
        if request.actor_role != UserRole.MODERATOR:
            raise ForbiddenError("list", "moderation queue", "-", request.actor_id)

        blogs, total = await self.blog_service.list_blogs(
            BlogQuery(status=request.status),
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        return ListModerationQueueResponse(
            blogs=[BlogSummary.from_blog(b) for b in blogs],
            total=total,
            page=request.page,
            limit=request.limit,
        )
