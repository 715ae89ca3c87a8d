"""PostgreSQL implementation of Comment repository."""

from typing import List

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devnovate.domain.error import NotFoundError
from devnovate.domain.model import Comment
from devnovate.domain.repository import CommentRepository
from devnovate.domain.value import BlogId
from devnovate.persistence.errors import classify
from devnovate.persistence.mappers import comment_to_dict, row_to_comment
from devnovate.persistence.tables import blogs_table, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment and bump Blog.comments in one savepoint."""
        with logfire.span(
            "comment_repository.add",
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
        ):
            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        insert(comments_table).values(**comment_to_dict(comment))
                    )
                    result = await self.session.execute(
                        update(blogs_table)
                        .where(blogs_table.c.id == comment.blog_id)
                        .values(comments=blogs_table.c.comments + 1)
                        .returning(blogs_table.c.id)
                    )
                    if result.first() is None:
                        raise NotFoundError("Blog", str(comment.blog_id))
            except IntegrityError as e:
                violation = classify(e)
                if not violation.is_foreign_key:
                    raise
                if violation.on_column("author_id"):
                    raise NotFoundError("User", str(comment.author_id)) from e
                # The blog was deleted under us
                raise NotFoundError("Blog", str(comment.blog_id)) from e

            return comment

    async def find_by_blog(self, blog_id: BlogId) -> List[Comment]:
        """Find all comments on a blog, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count comments on a blog."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.blog_id == blog_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
