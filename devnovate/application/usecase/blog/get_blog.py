"""Get blog use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from devnovate.domain.service import BlogService, CommentService, LikeService, UserService
from devnovate.domain.value import BlogId, UserId

from .models import BlogDetail


class GetBlogRequest(BaseModel):
    """Get blog request."""

    blog_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class BlogAuthor(BaseModel):
    """Display details of the blog's author."""

    display_name: str
    email: str


class BlogComment(BaseModel):
    """Comment in the blog response."""

    comment_id: str
    author_id: str
    author_display_name: str
    content: str
    created_at: datetime


class GetBlogResponse(BaseModel):
    """Get blog response."""

    blog: BlogDetail
    author: BlogAuthor
    comments: list[BlogComment]  # Newest first
    has_liked: bool


class GetBlogUseCase:
    """Use case for reading a single blog.

    Reading a published blog counts as a view.
    """

    def __init__(
        self,
        blog_service: BlogService,
        comment_service: CommentService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
            comment_service: Comment domain service
            like_service: Like domain service
            user_service: User domain service
        """
        self.blog_service = blog_service
        self.comment_service = comment_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Execute get blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        with logfire.span("get_blog.execute", blog_id=request.blog_id):
            blog_id = BlogId(UUID(request.blog_id))
            blog = await self.blog_service.require_blog(blog_id)
            blog = await self.blog_service.record_view(blog)

            author = await self.user_service.get_user_by_id(blog.author_id)
            comments = await self.comment_service.get_comments_for_blog(blog_id)

            has_liked = False
            if request.user_id:
                has_liked = await self.like_service.has_liked(
                    blog_id, UserId(UUID(request.user_id))
                )

            return GetBlogResponse(
                blog=BlogDetail.from_blog(blog),
                author=BlogAuthor(
                    display_name=author.display_name if author else "Anonymous",
                    email=author.email if author else "",
                ),
                comments=[
                    BlogComment(
                        comment_id=str(c.id),
                        author_id=str(c.author_id),
                        author_display_name=c.author.display_name,
                        content=c.content,
                        created_at=c.created_at,
                    )
                    for c in comments
                ],
                has_liked=has_liked,
            )
