"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from tally.domain.error import NotFoundError
from tally.domain.model.vote import Vote
from tally.domain.repository.vote import VoteRepository
from tally.domain.value import CommentId, VoteDirection, VoteId, VoterIdentity


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Stores copies so callers can't mutate stored votes behind its back,
    and mirrors the database's one-vote-per-voter constraint.
    """

    def __init__(self, store_user_ips: bool = False) -> None:
        self.store_user_ips = store_user_ips
        self._votes: dict[VoteId, Vote] = {}
        self._next_id = 1

    def _find_by_voter(
        self, comment_id: CommentId | None, voter: VoterIdentity | None
    ) -> Optional[Vote]:
        for vote in self._votes.values():
            if vote.comment_id == comment_id and vote.voter == voter:
                return vote
        return None

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        vote = self._votes.get(vote_id)
        return vote.model_copy() if vote else None

    async def find_by_comment_id(self, comment_id: CommentId) -> Optional[Vote]:
        """Find any one vote cast on a comment."""
        for vote in self._votes.values():
            if vote.comment_id == comment_id:
                return vote.model_copy()
        return None

    async def find_by_voter(
        self, comment_id: CommentId, voter: VoterIdentity
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific comment."""
        vote = self._find_by_voter(comment_id, voter)
        return vote.model_copy() if vote else None

    async def count_by_comment_id(self, comment_id: CommentId) -> int:
        """Count all votes on a comment."""
        return sum(1 for v in self._votes.values() if v.comment_id == comment_id)

    async def count_by_comment_id_and_direction(
        self, comment_id: CommentId, direction: VoteDirection
    ) -> int:
        """Count votes in one direction on a comment."""
        return sum(
            1
            for v in self._votes.values()
            if v.comment_id == comment_id and v.direction is direction
        )

    async def exists_by_voter_and_direction(
        self,
        comment_id: CommentId,
        voter: VoterIdentity,
        direction: VoteDirection,
    ) -> bool:
        """Check whether a voter cast a vote in the given direction."""
        vote = self._find_by_voter(comment_id, voter)
        return vote is not None and vote.direction is direction

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a new vote or update an existing one by ID.

        Raises:
            NotFoundError: If the vote has an ID that does not exist
            IntegrityError: If the voter already has another vote on the comment
        """
        existing = self._votes.get(vote.id) if vote.id is not None else None
        if vote.id is not None and existing is None:
            raise NotFoundError("Vote", str(vote.id))

        duplicate = self._find_by_voter(vote.comment_id, vote.voter)
        if duplicate and duplicate.id != vote.id:
            raise IntegrityError("Duplicate vote", None, Exception())

        now = datetime.now()
        if existing is None:
            stored = vote.model_copy(
                update={
                    "id": VoteId(self._next_id),
                    "last_known_address": (
                        vote.last_known_address if self.store_user_ips else None
                    ),
                    "created_at": now,
                    "updated_at": now,
                }
            )
            self._next_id += 1
        else:
            stored = vote.model_copy(
                update={
                    "last_known_address": (
                        vote.last_known_address
                        if self.store_user_ips
                        else existing.last_known_address
                    ),
                    "created_at": existing.created_at,
                    "updated_at": now,
                }
            )

        self._votes[stored.id] = stored
        return stored.model_copy()

    async def delete_by_id(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._votes.pop(vote_id, None) is not None
