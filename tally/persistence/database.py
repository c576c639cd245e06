"""Async engine and session factory for the vote store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tally.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine from DATABASE__* settings.

    SQL is echoed when DEBUG is on.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the factory for request-scoped sessions.

    Repositories flush explicitly and the DI provider commits once per
    request, so autoflush is off and committed rows stay readable.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
