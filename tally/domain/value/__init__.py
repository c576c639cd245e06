"""Domain value objects for comment voting."""

from tally.domain.value.identifiers import AccountId, CommentId, VoteId
from tally.domain.value.types import (
    AccountVoter,
    SessionToken,
    SessionVoter,
    VoteDirection,
    VoterIdentity,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CommentId",
    "VoteId",
    # Types
    "AccountVoter",
    "SessionToken",
    "SessionVoter",
    "VoteDirection",
    "VoterIdentity",
]
