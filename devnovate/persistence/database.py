"""Async engine and session factory for the PostgreSQL store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devnovate.config import Settings

APPLICATION_NAME = "devnovate-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Every connection is tagged with APPLICATION_NAME (visible in
    pg_stat_activity) and carries the configured statement timeout, so a
    runaway listing query can't hold a pooled connection indefinitely.
    """
    db = settings.database
    server_settings = {"application_name": APPLICATION_NAME}
    if db.statement_timeout_ms:
        server_settings["statement_timeout"] = str(db.statement_timeout_ms)

    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_recycle=db.pool_recycle_seconds,
        connect_args={"server_settings": server_settings},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Objects stay usable after commit, and nothing is flushed implicitly:
    repositories issue Core statements and the request provider owns the
    commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
