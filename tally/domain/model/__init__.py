"""Domain model entities for comment voting."""

from tally.domain.model.result import SaveVoteResult, ValidationFailure
from tally.domain.model.vote import Vote

__all__ = [
    "SaveVoteResult",
    "ValidationFailure",
    "Vote",
]
