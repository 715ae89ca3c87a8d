"""Get like status use case."""

from uuid import UUID

from pydantic import BaseModel

from devnovate.domain.service import LikeService
from devnovate.domain.value import BlogId, UserId


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    blog_id: str
    user_id: str | None = None  # Anonymous callers never have liked


class GetLikeStatusResponse(BaseModel):
    """Get like status response."""

    liked: bool


class GetLikeStatusUseCase:
    """Use case for checking whether the caller liked a blog."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        if not request.user_id:
            return GetLikeStatusResponse(liked=False)

        liked = await self.like_service.has_liked(
            BlogId(UUID(request.blog_id)), UserId(UUID(request.user_id))
        )
        return GetLikeStatusResponse(liked=liked)
