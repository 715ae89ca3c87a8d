"""Blog domain service."""

from datetime import datetime, timedelta
from typing import List, Optional, Tuple
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from devnovate.domain.error import ForbiddenError, NotFoundError, ValidationError
from devnovate.domain.model.blog import Blog, make_excerpt
from devnovate.domain.model.moderation import can_delete, can_edit, validate_initial_status
from devnovate.domain.repository import BlogQuery, BlogRepository, TagCount
from devnovate.domain.value import (
    Actor,
    BlogId,
    BlogStatus,
    Tag,
    TrendingAlgorithm,
    TrendingPeriod,
    UserId,
)

from .base import Service


class BlogService(Service):
    """Domain service for blog operations."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def create_blog(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tags: List[Tag],
        excerpt: Optional[str] = None,
        status: BlogStatus = BlogStatus.PENDING,
    ) -> Blog:
        """Create a new blog.

        Args:
            author_id: Author user ID
            title: Blog title
            content: Blog body
            tags: Tags (deduplicated, order preserved)
            excerpt: Summary; derived from content when empty
            status: Initial status, draft or pending

        Returns:
            Created blog with zeroed counters

        Raises:
            ValidationError: If the initial status isn't draft or pending
        """
        with logfire.span(
            "blog_service.create_blog",
            author_id=str(author_id),
            title=title,
            status=status.value,
        ):
            validate_initial_status(status)

            now = datetime.now()
            try:
                blog = Blog(
                    id=BlogId(uuid4()),
                    title=title.strip(),
                    content=content,
                    excerpt=(excerpt or "").strip() or make_excerpt(content),
                    tags=list(dict.fromkeys(tags)),
                    author_id=author_id,
                    status=status,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.blog_repository.save(blog)
            logfire.info(
                "Blog created",
                blog_id=str(saved.id),
                author_id=str(author_id),
                status=saved.status.value,
            )
            return saved

    async def get_blog_by_id(self, blog_id: BlogId) -> Blog | None:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            Blog if found, None otherwise
        """
        with logfire.span("blog_service.get_blog_by_id", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)

            if blog:
                logfire.info("Blog found", blog_id=str(blog_id), status=blog.status.value)
            else:
                logfire.warn("Blog not found", blog_id=str(blog_id))

            return blog

    async def require_blog(self, blog_id: BlogId) -> Blog:
        """Get a blog by ID or raise NotFoundError."""
        blog = await self.get_blog_by_id(blog_id)
        if not blog:
            raise NotFoundError("Blog", str(blog_id))
        return blog

    async def record_view(self, blog: Blog) -> Blog:
        """Count a view of a blog.

        Published blogs get views + 1 atomically; any other status is
        returned unchanged.

        Args:
            blog: Blog being fetched

        Returns:
            The blog as it should be shown to the reader
        """
        if not blog.is_published:
            return blog

        with logfire.span("blog_service.record_view", blog_id=str(blog.id)):
            viewed = await self.blog_repository.record_view(blog.id)
            if viewed is None:
                # Unpublished or deleted between the read and the increment
                logfire.info("View not counted", blog_id=str(blog.id))
                return blog
            return viewed

    async def list_blogs(
        self, query: BlogQuery, limit: int, offset: int
    ) -> Tuple[List[Blog], int]:
        """List blogs matching a query.

        Returns:
            The requested page and the total number of matches
        """
        with logfire.span(
            "blog_service.list_blogs",
            status=query.status.value if query.status else None,
            sort=query.sort.value,
            limit=limit,
            offset=offset,
        ):
            blogs = await self.blog_repository.find_all(query, limit=limit, offset=offset)
            total = await self.blog_repository.count(query)
            logfire.info("Blogs listed", count=len(blogs), total=total)
            return blogs, total

    async def list_by_author(self, author_id: UserId) -> List[Blog]:
        """List every blog by an author, any status."""
        with logfire.span("blog_service.list_by_author", author_id=str(author_id)):
            return await self.blog_repository.find_by_author(author_id)

    async def trending(
        self, algorithm: TrendingAlgorithm, period: TrendingPeriod, limit: int
    ) -> List[Blog]:
        """Published blogs created within `period`, ranked by `algorithm`."""
        with logfire.span(
            "blog_service.trending",
            algorithm=algorithm.value,
            period=period.value,
            limit=limit,
        ):
            since = None
            if period.days is not None:
                since = datetime.now() - timedelta(days=period.days)
            return await self.blog_repository.find_trending(
                algorithm, since, limit=limit
            )

    async def popular_tags(
        self, limit: int = 50, containing: Optional[str] = None
    ) -> List[TagCount]:
        """Most used tags across published blogs, optionally matching a fragment."""
        with logfire.span(
            "blog_service.popular_tags", limit=limit, containing=containing
        ):
            return await self.blog_repository.popular_tags(
                limit=limit, containing=containing
            )

    async def search_titles(self, fragment: str, limit: int) -> List[Blog]:
        """Published blogs whose title contains `fragment`, newest first."""
        with logfire.span("blog_service.search_titles", fragment=fragment, limit=limit):
            return await self.blog_repository.find_all(
                BlogQuery(title=fragment), limit=limit
            )

    async def update_content(
        self,
        blog_id: BlogId,
        actor: Actor,
        title: Optional[str] = None,
        content: Optional[str] = None,
        excerpt: Optional[str] = None,
        tags: Optional[List[Tag]] = None,
    ) -> Blog:
        """Edit a blog's content. Status is never changed here.

        Omitted fields keep their current value. A new content without an
        explicit excerpt re-derives the excerpt.

        Raises:
            NotFoundError: If the blog doesn't exist
            ForbiddenError: If the actor isn't the author
        """
        with logfire.span(
            "blog_service.update_content", blog_id=str(blog_id), user_id=str(actor.user_id)
        ):
            blog = await self.require_blog(blog_id)
            if not can_edit(blog, actor):
                logfire.warn(
                    "Edit by non-author rejected",
                    blog_id=str(blog_id),
                    user_id=str(actor.user_id),
                )
                raise ForbiddenError("edit", "blog", str(blog_id), str(actor.user_id))

            new_content = content if content is not None else blog.content
            if excerpt is not None and excerpt.strip():
                new_excerpt = excerpt.strip()
            elif content is not None:
                new_excerpt = make_excerpt(new_content)
            else:
                new_excerpt = blog.excerpt

            # Validate through the model before touching the store
            try:
                candidate = blog.revise(
                    title=title.strip() if title is not None else blog.title,
                    content=new_content,
                    excerpt=new_excerpt,
                    tags=list(dict.fromkeys(tags)) if tags is not None else blog.tags,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            updated = await self.blog_repository.update_content(
                blog_id,
                title=candidate.title,
                content=candidate.content,
                excerpt=candidate.excerpt,
                tags=candidate.tags,
            )
            if not updated:
                raise NotFoundError("Blog", str(blog_id))

            logfire.info("Blog content updated", blog_id=str(blog_id))
            return updated

    async def delete_blog(self, blog_id: BlogId, actor: Actor) -> None:
        """Hard-delete a blog with its likes and comments.

        Raises:
            NotFoundError: If the blog doesn't exist
            ForbiddenError: If the actor is neither the author nor a moderator
        """
        with logfire.span(
            "blog_service.delete_blog", blog_id=str(blog_id), user_id=str(actor.user_id)
        ):
            blog = await self.require_blog(blog_id)
            if not can_delete(blog, actor):
                logfire.warn(
                    "Delete by unauthorized user rejected",
                    blog_id=str(blog_id),
                    user_id=str(actor.user_id),
                )
                raise ForbiddenError("delete", "blog", str(blog_id), str(actor.user_id))

            deleted = await self.blog_repository.delete(blog_id)
            if not deleted:
                raise NotFoundError("Blog", str(blog_id))

            logfire.info(
                "Blog deleted",
                blog_id=str(blog_id),
                by_moderator=actor.is_moderator and blog.author_id != actor.user_id,
            )

    async def count_by_status(self, status: Optional[BlogStatus] = None) -> int:
        """Count blogs, optionally restricted to one status."""
        return await self.blog_repository.count(BlogQuery(status=status))

    async def total_views(self) -> int:
        """Sum of views across all blogs."""
        return await self.blog_repository.total_views()
