"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from devnovate.config import Settings
from devnovate.domain.repository import (
    AfterCommit,
    BlogRepository,
    CommentRepository,
    LikeRepository,
    UserRepository,
)
from devnovate.persistence.database import create_engine, create_session_factory
from devnovate.persistence.repository import (
    PostgresBlogRepository,
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresUserRepository,
)
from devnovate.util.di.base import ProviderBase
from devnovate.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        """Provide the queue of side effects to run once the session commits."""
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Callbacks queued on
        `after_commit` run only after a successful commit.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                after_commit.discard()
                raise
        await after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_blog_repository(self, session: AsyncSession) -> BlogRepository:
        """Provide Blog repository."""
        return PostgresBlogRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        """Provide Like repository."""
        return PostgresLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)
