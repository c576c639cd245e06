"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tally.config import VotingSettings
from tally.domain.repository import VoteRepository
from tally.persistence.repository.inmemory import InMemoryVoteRepository
from tally.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so votes survive across the requests of one test client.
    Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_vote_repository(self, voting_settings: VotingSettings) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store_user_ips=voting_settings.store_user_ips)
