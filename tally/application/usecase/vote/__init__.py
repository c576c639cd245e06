"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_summary import (
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    VoteSummaryResponse,
)
from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteSummaryRequest",
    "GetVoteSummaryUseCase",
    "VoteSummaryResponse",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
]
