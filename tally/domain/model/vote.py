"""Vote entity.

A vote records one voter's stance (up or down) on one comment.
Each voter, account or anonymous session, holds at most one vote per comment.
"""

from datetime import datetime

from pydantic import ConfigDict

from tally.domain.model.common import DomainModel
from tally.domain.value import CommentId, VoteDirection, VoteId, VoterIdentity


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per comment (enforced by database unique constraints)
    - Direction is either up or down, flipping it updates the same record
    - The address is only kept when address capture is enabled

    Unlike most domain models a vote is mutable: saving assigns the new id
    and resolved voter back onto the caller's object. `id`, `direction` and
    `voter` are unset on a vote that has not been saved yet.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    id: VoteId | None = None
    comment_id: CommentId | None = None
    voter: VoterIdentity | None = None
    direction: VoteDirection | None = None
    last_known_address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_upvote(self) -> bool:
        return self.direction is VoteDirection.UP

    @property
    def is_downvote(self) -> bool:
        return self.direction is VoteDirection.DOWN
