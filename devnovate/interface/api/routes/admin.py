"""Moderator routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel, Field

from devnovate.application.usecase.auth import GetCurrentUserUseCase
from devnovate.application.usecase.moderation import (
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
    ListModerationQueueRequest,
    ListModerationQueueResponse,
    ListModerationQueueUseCase,
    ModerateBlogRequest,
    ModerateBlogResponse,
    ModerateBlogUseCase,
)
from devnovate.domain.value import BlogStatus, ModerationAction
from devnovate.interface.api.auth import require_user

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ModerateBlogAPIRequest(BaseModel):
    """API request for a moderation action."""

    action: ModerationAction
    reason: str | None = Field(default=None, max_length=1000)


@router.get("/blogs", response_model=ListModerationQueueResponse)
async def list_moderation_queue(
    list_moderation_queue_use_case: FromDishka[ListModerationQueueUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    status: BlogStatus | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListModerationQueueResponse:
    """Blogs for review, optionally filtered by status. Moderators only."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await list_moderation_queue_use_case.execute(
        ListModerationQueueRequest(
            actor_id=user.user_id,
            actor_role=user.role,
            status=status,
            page=page,
            limit=limit,
        )
    )


@router.patch("/blogs/{blog_id}", response_model=ModerateBlogResponse)
async def moderate_blog(
    blog_id: UUID,
    request: ModerateBlogAPIRequest,
    moderate_blog_use_case: FromDishka[ModerateBlogUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModerateBlogResponse:
    """Approve, reject, hide or unhide a blog.

    Returns 403 for non-moderators, 409 when the action isn't valid from
    the blog's current status or the blog changed concurrently.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await moderate_blog_use_case.execute(
        ModerateBlogRequest(
            blog_id=str(blog_id),
            action=request.action,
            actor_id=user.user_id,
            actor_role=user.role,
            reason=request.reason,
        )
    )


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetStatsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetStatsResponse:
    """Dashboard totals. Moderators only."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await get_stats_use_case.execute(
        GetStatsRequest(actor_id=user.user_id, actor_role=user.role)
    )
