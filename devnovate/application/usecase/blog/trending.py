"""Trending blogs use case."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from devnovate.config import TrendingSettings
from devnovate.domain.service import BlogService
from devnovate.domain.value import TrendingAlgorithm, TrendingPeriod

from .models import BlogSummary


class TrendingBlogsRequest(BaseModel):
    """Trending blogs request. Omitted fields fall back to the configured defaults."""

    algorithm: TrendingAlgorithm | None = None
    period: TrendingPeriod | None = None
    limit: int | None = Field(default=None, ge=1, le=50)


class TrendingBlogsResponse(BaseModel):
    """Trending blogs response."""

    blogs: list[BlogSummary]
    algorithm: TrendingAlgorithm
    period: TrendingPeriod
    generated_at: datetime


class TrendingBlogsUseCase:
    """Use case for the trending listing."""

    def __init__(self, blog_service: BlogService, settings: TrendingSettings) -> None:
        """Initialize trending blogs use case.

        Args:
            blog_service: Blog domain service
            settings: Default algorithm, period and size
        """
        self.blog_service = blog_service
        self.settings = settings

    async def execute(self, request: TrendingBlogsRequest) -> TrendingBlogsResponse:
        algorithm = request.algorithm or TrendingAlgorithm(self.settings.algorithm)
        period = request.period or TrendingPeriod(self.settings.period)

        blogs = await self.blog_service.trending(
            algorithm, period, limit=request.limit or self.settings.limit
        )
        return TrendingBlogsResponse(
            blogs=[BlogSummary.from_blog(b) for b in blogs],
            algorithm=algorithm,
            period=period,
            generated_at=datetime.now(timezone.utc),
        )
