"""PostgreSQL implementation of Blog repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import (
    String,
    asc,
    case,
    delete,
    desc,
    func,
    insert,
    or_,
    select,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession

from devnovate.domain.model import Blog
from devnovate.domain.model.trending import SECONDS_PER_DAY, SECONDS_PER_HOUR, WEIGHTS
from devnovate.domain.repository.blog import BlogQuery, BlogRepository, TagCount
from devnovate.domain.value import (
    BlogId,
    BlogSortField,
    BlogStatus,
    SortOrder,
    Tag,
    TrendingAlgorithm,
    UserId,
)
from devnovate.persistence.mappers import blog_to_dict, row_to_blog
from devnovate.persistence.tables import blogs_table, comments_table, likes_table


def _filtered(stmt, query: BlogQuery):
    """Apply the query's WHERE clauses to a statement."""
    if query.status is not None:
        stmt = stmt.where(blogs_table.c.status == query.status.value)
    if query.tag is not None:
        stmt = stmt.where(blogs_table.c.tags.contains([query.tag.root]))
    if query.author_id is not None:
        stmt = stmt.where(blogs_table.c.author_id == query.author_id)
    if query.search:
        stmt = stmt.where(
            or_(
                blogs_table.c.title.icontains(query.search, autoescape=True),
                blogs_table.c.content.icontains(query.search, autoescape=True),
            )
        )
    if query.title:
        stmt = stmt.where(blogs_table.c.title.icontains(query.title, autoescape=True))
    if query.date_from is not None:
        stmt = stmt.where(blogs_table.c.created_at >= query.date_from)
    if query.date_to is not None:
        stmt = stmt.where(blogs_table.c.created_at <= query.date_to)
    return stmt


def _ordering(query: BlogQuery) -> list:
    direction = desc if query.order == SortOrder.DESC else asc
    if query.sort == BlogSortField.VIEWS:
        keys = [blogs_table.c.views]
    elif query.sort == BlogSortField.LIKES:
        keys = [blogs_table.c.likes]
    elif query.sort == BlogSortField.POPULARITY:
        keys = [blogs_table.c.likes, blogs_table.c.views]
    else:
        keys = []
    # created_at breaks ties so pagination is stable
    return [direction(k) for k in keys] + [direction(blogs_table.c.created_at)]


def _trending_ordering(algorithm: TrendingAlgorithm) -> list:
    """ORDER BY for a trending algorithm, computed by the database."""
    if algorithm == TrendingAlgorithm.POPULARITY:
        return [
            desc(blogs_table.c.likes),
            desc(blogs_table.c.views),
            desc(blogs_table.c.created_at),
        ]

    weights = WEIGHTS[algorithm]
    engagement = (
        blogs_table.c.likes * weights.likes
        + blogs_table.c.comments * weights.comments
        + blogs_table.c.views * weights.views
    )
    age = func.extract("epoch", func.now() - blogs_table.c.created_at)

    if algorithm == TrendingAlgorithm.VELOCITY:
        hours = age / SECONDS_PER_HOUR
        score = case((hours > 0, engagement / (hours + 1)), else_=0)
    elif algorithm == TrendingAlgorithm.RECENT:
        score = engagement - age / SECONDS_PER_DAY
    else:
        score = engagement
    return [desc(score), desc(blogs_table.c.created_at)]


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository.

    Counter and status changes are single UPDATE statements; the database
    evaluates `likes + 1` and `status = :expected` under its row lock.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        with logfire.span("blog_repository.find_by_id", blog_id=str(blog_id)):
            stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_blog(dict(row)) if row else None

    async def find_all(
        self, query: BlogQuery, limit: int = 10, offset: int = 0
    ) -> List[Blog]:
        """Find blogs matching a query."""
        with logfire.span(
            "blog_repository.find_all",
            sort=query.sort.value,
            order=query.order.value,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                _filtered(select(blogs_table), query)
                .order_by(*_ordering(query))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            blogs = [row_to_blog(dict(row)) for row in result.mappings().all()]
            logfire.info("Found blogs", count=len(blogs))
            return blogs

    async def count(self, query: BlogQuery) -> int:
        """Count blogs matching a query."""
        stmt = _filtered(select(func.count()).select_from(blogs_table), query)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(self, author_id: UserId) -> List[Blog]:
        """Find every blog by an author, newest first."""
        stmt = (
            select(blogs_table)
            .where(blogs_table.c.author_id == author_id)
            .order_by(desc(blogs_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_blog(dict(row)) for row in result.mappings().all()]

    async def find_trending(
        self,
        algorithm: TrendingAlgorithm,
        since: Optional[datetime],
        limit: int = 10,
    ) -> List[Blog]:
        """Find published blogs ranked by a trending algorithm."""
        with logfire.span(
            "blog_repository.find_trending",
            algorithm=algorithm.value,
            since=since.isoformat() if since else None,
        ):
            stmt = select(blogs_table).where(
                blogs_table.c.status == BlogStatus.PUBLISHED.value
            )
            if since is not None:
                stmt = stmt.where(blogs_table.c.created_at >= since)
            stmt = stmt.order_by(*_trending_ordering(algorithm)).limit(limit)
            result = await self.session.execute(stmt)
            return [row_to_blog(dict(row)) for row in result.mappings().all()]

    async def popular_tags(
        self, limit: int = 50, containing: Optional[str] = None
    ) -> List[TagCount]:
        """Most used tags across published blogs."""
        tags = (
            select(func.unnest(blogs_table.c.tags, type_=String).label("tag"))
            .where(blogs_table.c.status == BlogStatus.PUBLISHED.value)
            .subquery()
        )
        count = func.count().label("count")
        stmt = select(tags.c.tag, count)
        if containing:
            stmt = stmt.where(tags.c.tag.icontains(containing, autoescape=True))
        stmt = (
            stmt.group_by(tags.c.tag)
            .order_by(desc(count), tags.c.tag)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            TagCount(tag=row["tag"], count=row["count"])
            for row in result.mappings().all()
        ]

    async def total_views(self) -> int:
        """Sum of views across all blogs."""
        stmt = select(func.coalesce(func.sum(blogs_table.c.views), 0))
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def save(self, blog: Blog) -> Blog:
        """Insert a new blog."""
        with logfire.span("blog_repository.save", blog_id=str(blog.id)):
            stmt = insert(blogs_table).values(**blog_to_dict(blog))
            await self.session.execute(stmt)
            await self.session.flush()
            return blog

    async def update_content(
        self,
        blog_id: BlogId,
        title: str,
        content: str,
        excerpt: str,
        tags: List[Tag],
    ) -> Optional[Blog]:
        """Update the editable fields of a blog."""
        with logfire.span("blog_repository.update_content", blog_id=str(blog_id)):
            stmt = (
                update(blogs_table)
                .where(blogs_table.c.id == blog_id)
                .values(
                    title=title,
                    content=content,
                    excerpt=excerpt,
                    tags=[t.root for t in tags],
                    updated_at=datetime.now(),
                )
                .returning(blogs_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
            return row_to_blog(dict(row)) if row else None

    async def transition_status(
        self,
        blog_id: BlogId,
        expected: BlogStatus,
        new_status: BlogStatus,
        rejection_reason: Optional[str] = None,
    ) -> Optional[Blog]:
        """Compare-and-set the status of a blog."""
        with logfire.span(
            "blog_repository.transition_status",
            blog_id=str(blog_id),
            expected=expected.value,
            new_status=new_status.value,
        ):
            stmt = (
                update(blogs_table)
                .where(
                    blogs_table.c.id == blog_id,
                    blogs_table.c.status == expected.value,
                )
                .values(
                    status=new_status.value,
                    rejection_reason=(
                        rejection_reason if new_status == BlogStatus.REJECTED else None
                    ),
                    updated_at=datetime.now(),
                )
                .returning(blogs_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
            return row_to_blog(dict(row)) if row else None

    async def record_view(self, blog_id: BlogId) -> Optional[Blog]:
        """Atomically increment views of a published blog."""
        stmt = (
            update(blogs_table)
            .where(
                blogs_table.c.id == blog_id,
                blogs_table.c.status == BlogStatus.PUBLISHED.value,
            )
            .values(views=blogs_table.c.views + 1)
            .returning(blogs_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_blog(dict(row)) if row else None

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog with its likes and comments."""
        with logfire.span("blog_repository.delete", blog_id=str(blog_id)):
            async with self.session.begin_nested():
                await self.session.execute(
                    delete(likes_table).where(likes_table.c.blog_id == blog_id)
                )
                await self.session.execute(
                    delete(comments_table).where(comments_table.c.blog_id == blog_id)
                )
                result = await self.session.execute(
                    delete(blogs_table).where(blogs_table.c.id == blog_id)
                )
            return result.rowcount > 0  # type: ignore[attr-defined]
