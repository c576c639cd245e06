"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tally.config import Settings, VotingSettings
from tally.domain.repository import VoteRepository
from tally.persistence.database import create_engine, create_session_factory
from tally.persistence.repository import PostgresVoteRepository
from tally.util.di.base import ProviderBase
from tally.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Vote store component. Subclassed by the Postgres and in-memory variants."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Vote store backed by PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine, disposing its pool when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide one transaction per request.

        Votes written during the request are committed when it finishes
        cleanly. Any exception, including a duplicate-vote IntegrityError,
        rolls the whole request back before propagating.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Vote store transaction committed")
            except Exception as e:
                logfire.warn(
                    "Vote store transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(
        self, session: AsyncSession, voting_settings: VotingSettings
    ) -> VoteRepository:
        """Provide the Postgres vote repository."""
        return PostgresVoteRepository(
            session, store_user_ips=voting_settings.store_user_ips
        )
