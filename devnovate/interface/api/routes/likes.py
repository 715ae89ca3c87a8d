"""Like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from devnovate.application.usecase.auth import GetCurrentUserUseCase
from devnovate.application.usecase.like import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from devnovate.domain.service import JWTService
from devnovate.interface.api.auth import optional_user_id, require_user

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.get("/blogs/{blog_id}/like", response_model=GetLikeStatusResponse)
async def get_like_status(
    blog_id: UUID,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetLikeStatusResponse:
    """Whether the caller liked the blog (false when anonymous)."""
    user_id = optional_user_id(jwt_service, auth_token, authorization)
    return await get_like_status_use_case.execute(
        GetLikeStatusRequest(blog_id=str(blog_id), user_id=user_id)
    )


@router.post("/blogs/{blog_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    blog_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ToggleLikeResponse:
    """Like the blog, or unlike it if already liked.

    Requires authentication.

    Returns:
        New liked state and like count
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(blog_id=str(blog_id), user_id=user.user_id)
    )
