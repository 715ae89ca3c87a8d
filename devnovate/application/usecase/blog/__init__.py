"""Blog use cases."""

from .create_blog import CreateBlogRequest, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogResponse, DeleteBlogUseCase
from .get_blog import GetBlogRequest, GetBlogResponse, GetBlogUseCase
from .list_blogs import ListBlogsRequest, ListBlogsResponse, ListBlogsUseCase
from .list_my_blogs import ListMyBlogsRequest, ListMyBlogsResponse, ListMyBlogsUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase
from .models import BlogDetail, BlogSummary
from .trending import (
    TrendingBlogsRequest,
    TrendingBlogsResponse,
    TrendingBlogsUseCase,
)
from .update_blog import UpdateBlogRequest, UpdateBlogUseCase

__all__ = [
    "BlogDetail",
    "BlogSummary",
    "CreateBlogRequest",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogResponse",
    "DeleteBlogUseCase",
    "GetBlogRequest",
    "GetBlogResponse",
    "GetBlogUseCase",
    "ListBlogsRequest",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "ListMyBlogsRequest",
    "ListMyBlogsResponse",
    "ListMyBlogsUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TrendingBlogsRequest",
    "TrendingBlogsResponse",
    "TrendingBlogsUseCase",
    "UpdateBlogRequest",
    "UpdateBlogUseCase",
]
