"""Vote lifecycle events.

The vote service announces saves and deletes through a publisher that is
injected at construction. Publication is fire-and-forget from the service's
point of view, but an observer that raises aborts the operation in progress.
"""

from abc import ABC, abstractmethod
from enum import Enum

from tally.domain.model.vote import Vote
from tally.domain.value.common import ValueObject


class VoteEventKind(str, Enum):
    """Points in the vote lifecycle observers can hook into."""

    BEFORE_SAVE_VOTE = "beforeSaveVote"
    AFTER_SAVE_VOTE = "afterSaveVote"
    BEFORE_DELETE_VOTE = "beforeDeleteVote"
    AFTER_DELETE_VOTE = "afterDeleteVote"


class VoteEvent(ValueObject):
    """A vote lifecycle notification.

    `is_new` is set for save events only.
    """

    kind: VoteEventKind
    vote: Vote
    is_new: bool | None = None


class VoteEventPublisher(ABC):
    """Publisher of vote lifecycle events.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def publish(self, event: VoteEvent) -> None:
        """Deliver an event to every observer of its kind.

        Args:
            event: The event to deliver

        Raises:
            Exception: Whatever an observer raises is propagated
        """
        pass
