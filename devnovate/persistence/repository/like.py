"""PostgreSQL implementation of Like repository."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devnovate.domain.error import ConflictError, NotFoundError
from devnovate.domain.model import Like
from devnovate.domain.repository import LikeRepository, LikeToggle
from devnovate.domain.value import BlogId, LikeId, UserId
from devnovate.persistence.errors import classify
from devnovate.persistence.mappers import like_to_dict
from devnovate.persistence.tables import blogs_table, likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether the user has liked the blog."""
        stmt = select(likes_table.c.id).where(
            and_(likes_table.c.blog_id == blog_id, likes_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def toggle(self, blog_id: BlogId, user_id: UserId) -> LikeToggle:
        """Like or unlike inside one savepoint.

        The fact row and the counter update commit or roll back together.
        """
        with logfire.span(
            "like_repository.toggle", blog_id=str(blog_id), user_id=str(user_id)
        ):
            try:
                async with self.session.begin_nested():
                    removed = await self.session.execute(
                        delete(likes_table).where(
                            and_(
                                likes_table.c.blog_id == blog_id,
                                likes_table.c.user_id == user_id,
                            )
                        )
                    )
                    liked = removed.rowcount == 0  # type: ignore[attr-defined]

                    if liked:
                        like = Like(
                            id=LikeId(uuid4()),
                            blog_id=blog_id,
                            user_id=user_id,
                            created_at=datetime.now(),
                        )
                        await self.session.execute(
                            insert(likes_table).values(**like_to_dict(like))
                        )
                        delta = blogs_table.c.likes + 1
                    else:
                        delta = blogs_table.c.likes - 1

                    result = await self.session.execute(
                        update(blogs_table)
                        .where(blogs_table.c.id == blog_id)
                        .values(likes=delta)
                        .returning(blogs_table.c.likes)
                    )
                    likes = result.scalar_one_or_none()
                    if likes is None:
                        raise NotFoundError("Blog", str(blog_id))
            except IntegrityError as e:
                violation = classify(e)
                if violation.is_foreign_key:
                    # Blog or user deleted between the lookup and the insert
                    if violation.on_column("user_id"):
                        raise NotFoundError("User", str(user_id)) from e
                    raise NotFoundError("Blog", str(blog_id)) from e
                logfire.warn(
                    "Concurrent like toggle collided",
                    blog_id=str(blog_id),
                    user_id=str(user_id),
                    error=str(e.orig),
                )
                raise ConflictError(
                    "Like toggle collided with a concurrent request"
                ) from e

            return LikeToggle(liked=liked, likes=likes)

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count Like facts for a blog."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.blog_id == blog_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
