"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from devnovate.application.usecase.auth import GetCurrentUserUseCase
from devnovate.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from devnovate.interface.api.auth import require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(max_length=5000)


@router.get("/blogs/{blog_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    blog_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List a blog's comments, newest first."""
    return await get_comments_use_case.execute(GetCommentsRequest(blog_id=str(blog_id)))


@router.post(
    "/blogs/{blog_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    blog_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a blog.

    Requires authentication. Blank comments are rejected with 400.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            blog_id=str(blog_id), author_id=user.user_id, content=request.content
        )
    )
