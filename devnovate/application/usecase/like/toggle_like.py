"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.service import LikeService
from devnovate.domain.value import BlogId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    blog_id: str
    user_id: str  # From authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool
    likes: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a blog."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Not idempotent: calling twice restores the original state.

        Raises:
            NotFoundError: If the blog doesn't exist
            ConflictError: If a concurrent toggle collided
        """
        result = await self.like_service.toggle_like(
            BlogId(UUID(request.blog_id)), UserId(UUID(request.user_id))
        )
        return ToggleLikeResponse(liked=result.liked, likes=result.likes)
