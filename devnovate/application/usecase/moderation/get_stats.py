"""Get moderation stats use case."""

from pydantic import BaseModel

from devnovate.domain.error import ForbiddenError
from devnovate.domain.service import BlogService, UserService
from devnovate.domain.value import BlogStatus, UserRole


class GetStatsRequest(BaseModel):
    """Get stats request."""

    actor_id: str
    actor_role: UserRole = UserRole.USER


class GetStatsResponse(BaseModel):
    """Totals for the moderator dashboard."""

    total_blogs: int
    pending_blogs: int
    published_blogs: int
    total_users: int
    total_views: int


class GetStatsUseCase:
    """Use case for moderator dashboard totals."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        """Initialize get stats use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
        """
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        """Compute dashboard totals.

        Raises:
            ForbiddenError: If the actor isn't a moderator
        """
        if request.actor_role != UserRole.MODERATOR:
            raise ForbiddenError("view", "stats", "-", request.actor_id)

        return GetStatsResponse(
            total_blogs=await self.blog_service.count_by_status(None),
            pending_blogs=await self.blog_service.count_by_status(BlogStatus.PENDING),
            published_blogs=await self.blog_service.count_by_status(BlogStatus.PUBLISHED),
            total_users=await self.user_service.count_users(),
            total_views=await self.blog_service.total_views(),
        )
