"""Event publication providers."""

from dishka import Scope, provide

from tally.adapter.event_bus import VoteEventBus
from tally.domain.event import VoteEventPublisher
from tally.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """In-process event bus - concrete, no mocks needed.

    APP-scoped so subscriptions made at startup see every request's events.
    """

    @provide(scope=Scope.APP)
    def get_event_bus(self) -> VoteEventBus:
        """Provide the vote event bus."""
        return VoteEventBus()

    @provide(scope=Scope.APP)
    def get_event_publisher(self, event_bus: VoteEventBus) -> VoteEventPublisher:
        """Expose the bus as the publisher the vote service depends on."""
        return event_bus
