"""In-process publisher for vote lifecycle events."""

from collections import defaultdict
from typing import Awaitable, Callable

import logfire

from tally.domain.event import VoteEvent, VoteEventKind, VoteEventPublisher

VoteEventHandler = Callable[[VoteEvent], Awaitable[None]]


class VoteEventBus(VoteEventPublisher):
    """Dispatches vote events to handlers subscribed per event kind.

    Handlers run one after another in subscription order. A handler that
    raises stops dispatch and the error reaches the publisher's caller,
    which is how a before-save observer vetoes a save.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[VoteEventKind, list[VoteEventHandler]] = (
            defaultdict(list)
        )

    def subscribe(self, kind: VoteEventKind, handler: VoteEventHandler) -> None:
        """Register a handler for one kind of event."""
        self._handlers[kind].append(handler)

    def unsubscribe(self, kind: VoteEventKind, handler: VoteEventHandler) -> None:
        """Remove a handler, ignoring handlers that were never registered."""
        if handler in self._handlers[kind]:
            self._handlers[kind].remove(handler)

    def has_handlers(self, kind: VoteEventKind) -> bool:
        return bool(self._handlers[kind])

    async def publish(self, event: VoteEvent) -> None:
        """Deliver an event to its subscribed handlers."""
        handlers = list(self._handlers[event.kind])
        if not handlers:
            return

        with logfire.span(
            "vote_event_bus.publish",
            kind=event.kind.value,
            vote_id=event.vote.id,
            handler_count=len(handlers),
        ):
            for handler in handlers:
                await handler(event)
