"""Application layer DI providers."""

from dishka import Scope, provide

from tally.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteSummaryUseCase,
    RemoveVoteUseCase,
)
from tally.config import VotingSettings
from tally.domain.service import VoteService
from tally.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_summary_use_case(
        self, vote_service: VoteService, voting_settings: VotingSettings
    ) -> GetVoteSummaryUseCase:
        """Provide get vote summary use case."""
        return GetVoteSummaryUseCase(
            vote_service=vote_service, voting_settings=voting_settings
        )
