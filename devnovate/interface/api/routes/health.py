"""Liveness check."""

import time
from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from devnovate.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

_STARTED = time.monotonic()


class HealthResponse(BaseModel):
    """Liveness payload; never touches the database."""

    status: str
    version: str
    environment: str
    uptime_seconds: int
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests."""
    return HealthResponse(
        status="healthy",
        version=settings.version,
        environment=settings.environment,
        uptime_seconds=int(time.monotonic() - _STARTED),
        checked_at=datetime.now(timezone.utc),
    )
