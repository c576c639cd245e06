"""PostgreSQL repository implementations."""

from tally.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresVoteRepository",
]
