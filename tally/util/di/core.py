"""Configuration providers."""

from dishka import Scope, provide

from tally.config import AuthSettings, Settings, VotingSettings
from tally.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections other providers depend on.

    Settings are read from the environment once per container.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Voting section: session key, address capture, downvote limit."""
        return settings.voting
