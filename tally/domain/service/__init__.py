"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .vote_service import SessionStore, VoterContext, VoteService

__all__ = [
    "JWTService",
    "Service",
    "SessionStore",
    "VoteService",
    "VoterContext",
]
