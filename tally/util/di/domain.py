"""Domain service providers."""

from dishka import Scope, provide

from tally.config import AuthSettings, VotingSettings
from tally.domain.event import VoteEventPublisher
from tally.domain.repository import VoteRepository
from tally.domain.service import JWTService, VoteService
from tally.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, built per request.

    The vote service shares the request's repository, and with it the
    request's database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        voting_settings: VotingSettings,
        event_publisher: VoteEventPublisher,
    ) -> VoteService:
        """Provide the vote service wired to the app-wide event bus."""
        return VoteService(
            vote_repository=vote_repository,
            session_key=voting_settings.session_key,
            event_publisher=event_publisher,
        )
