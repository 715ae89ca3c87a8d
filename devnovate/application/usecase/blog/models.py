"""Blog response models shared by the blog use cases."""

from datetime import datetime

from pydantic import BaseModel

from devnovate.domain.model.blog import Blog
from devnovate.domain.value import BlogStatus


class BlogSummary(BaseModel):
    """Blog in listings (without the body)."""

    blog_id: str
    title: str
    excerpt: str
    tags: list[str]
    author_id: str
    status: BlogStatus
    rejection_reason: str | None
    views: int
    likes: int
    comments: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogSummary":
        return cls(
            blog_id=str(blog.id),
            title=blog.title,
            excerpt=blog.excerpt,
            tags=[tag.root for tag in blog.tags],
            author_id=str(blog.author_id),
            status=blog.status,
            rejection_reason=blog.rejection_reason,
            views=blog.views,
            likes=blog.likes,
            comments=blog.comments,
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )


class BlogDetail(BlogSummary):
    """Blog with its body."""

    content: str

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogDetail":
        return cls(
            **BlogSummary.from_blog(blog).model_dump(),
            content=blog.content,
        )
