"""Blog routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from devnovate.application.usecase.auth import GetCurrentUserUseCase
from devnovate.application.usecase.blog import (
    BlogDetail,
    CreateBlogRequest,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogResponse,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
    ListMyBlogsRequest,
    ListMyBlogsResponse,
    ListMyBlogsUseCase,
    ListTagsResponse,
    ListTagsUseCase,
    TrendingBlogsRequest,
    TrendingBlogsResponse,
    TrendingBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogUseCase,
)
from devnovate.application.usecase.moderation import (
    ModerateBlogRequest,
    ModerateBlogResponse,
    ModerateBlogUseCase,
)
from devnovate.domain.service import JWTService
from devnovate.domain.value import (
    BlogSortField,
    BlogStatus,
    ModerationAction,
    SortOrder,
    TrendingAlgorithm,
    TrendingPeriod,
)
from devnovate.interface.api.auth import optional_user_id, require_user

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


class CreateBlogAPIRequest(BaseModel):
    """API request for creating a blog."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: str | None = Field(default=None, max_length=500)
    tags: list[str] = Field(default_factory=list, max_length=10)
    status: BlogStatus = BlogStatus.PENDING  # draft or pending


class UpdateBlogAPIRequest(BaseModel):
    """API request for editing a blog. Status is not editable here."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    excerpt: str | None = Field(default=None, max_length=500)
    tags: list[str] | None = Field(default=None, max_length=10)


@router.get("", response_model=ListBlogsResponse)
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    tag: str | None = None,
    author: UUID | None = None,
    search: str | None = Query(default=None, max_length=200),
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    sort: BlogSortField = BlogSortField.CREATED_AT,
    order: SortOrder = SortOrder.DESC,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> ListBlogsResponse:
    """Browse published blogs.

    Args:
        tag: Only blogs with this tag
        author: Only blogs by this author
        search: Case-insensitive substring of title or content
        date_from: Created at or after
        date_to: Created at or before
        sort: created_at, views, likes or popularity
        order: asc or desc
        page: 1-based page number
        limit: Page size

    Returns:
        Page of blog summaries
    """
    return await list_blogs_use_case.execute(
        ListBlogsRequest(
            tag=tag,
            author_id=str(author) if author else None,
            search=search,
            date_from=date_from,
            date_to=date_to,
            sort=sort,
            order=order,
            page=page,
            limit=limit,
        )
    )


@router.get("/trending", response_model=TrendingBlogsResponse)
async def trending_blogs(
    trending_blogs_use_case: FromDishka[TrendingBlogsUseCase],
    algorithm: TrendingAlgorithm | None = None,
    period: TrendingPeriod | None = None,
    limit: int | None = Query(default=None, ge=1, le=50),
) -> TrendingBlogsResponse:
    """Published blogs ranked by engagement.

    Args:
        algorithm: engagement, velocity, recent or popularity
        period: day, week, month or all
        limit: Number of blogs
    """
    return await trending_blogs_use_case.execute(
        TrendingBlogsRequest(algorithm=algorithm, period=period, limit=limit)
    )


@router.get("/tags", response_model=ListTagsResponse)
async def list_tags(list_tags_use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """Most used tags of published blogs."""
    return await list_tags_use_case.execute()


@router.get("/mine", response_model=ListMyBlogsResponse)
async def list_my_blogs(
    list_my_blogs_use_case: FromDishka[ListMyBlogsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListMyBlogsResponse:
    """Every blog by the caller, in any status."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await list_my_blogs_use_case.execute(ListMyBlogsRequest(user_id=user.user_id))


@router.post("", response_model=BlogDetail, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: CreateBlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> BlogDetail:
    """Write a new blog as draft or submitted for review.

    Requires authentication.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await create_blog_use_case.execute(
        CreateBlogRequest(
            author_id=user.user_id,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=request.tags,
            status=request.status,
        )
    )


@router.get("/{blog_id}", response_model=GetBlogResponse)
async def get_blog(
    blog_id: UUID,
    get_blog_use_case: FromDishka[GetBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetBlogResponse:
    """Read a blog with its comments.

    Counts a view when the blog is published. Authentication is optional
    and only used for `has_liked`.
    """
    user_id = optional_user_id(jwt_service, auth_token, authorization)
    return await get_blog_use_case.execute(
        GetBlogRequest(blog_id=str(blog_id), user_id=user_id)
    )


@router.put("/{blog_id}", response_model=BlogDetail)
async def update_blog(
    blog_id: UUID,
    request: UpdateBlogAPIRequest,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> BlogDetail:
    """Edit a blog. Only the author may edit."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await update_blog_use_case.execute(
        UpdateBlogRequest(
            blog_id=str(blog_id),
            actor_id=user.user_id,
            actor_role=user.role,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=request.tags,
        )
    )


@router.delete("/{blog_id}", response_model=DeleteBlogResponse)
async def delete_blog(
    blog_id: UUID,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteBlogResponse:
    """Delete a blog with its likes and comments (author or moderator)."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await delete_blog_use_case.execute(
        DeleteBlogRequest(
            blog_id=str(blog_id), actor_id=user.user_id, actor_role=user.role
        )
    )


@router.post("/{blog_id}/submit", response_model=ModerateBlogResponse)
async def submit_blog(
    blog_id: UUID,
    moderate_blog_use_case: FromDishka[ModerateBlogUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ModerateBlogResponse:
    """Submit a draft for review (author only)."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await moderate_blog_use_case.execute(
        ModerateBlogRequest(
            blog_id=str(blog_id),
            action=ModerationAction.SUBMIT,
            actor_id=user.user_id,
            actor_role=user.role,
        )
    )
