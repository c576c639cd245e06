"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tally.domain.model.vote import Vote
from tally.domain.value import CommentId, VoteDirection, VoteId, VoterIdentity


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_comment_id(self, comment_id: CommentId) -> Optional[Vote]:
        """Find any one vote cast on a comment.

        Args:
            comment_id: ID of the comment

        Returns:
            An arbitrary vote on the comment, None if there are none
        """
        pass

    @abstractmethod
    async def find_by_voter(
        self, comment_id: CommentId, voter: VoterIdentity
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific comment.

        Args:
            comment_id: ID of the comment
            voter: Account or session identity of the voter

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_comment_id(self, comment_id: CommentId) -> int:
        """Count all votes on a comment.

        Args:
            comment_id: ID of the comment

        Returns:
            Number of votes, zero if none
        """
        pass

    @abstractmethod
    async def count_by_comment_id_and_direction(
        self, comment_id: CommentId, direction: VoteDirection
    ) -> int:
        """Count votes in one direction on a comment.

        Args:
            comment_id: ID of the comment
            direction: Up or down

        Returns:
            Number of matching votes, zero if none
        """
        pass

    @abstractmethod
    async def exists_by_voter_and_direction(
        self,
        comment_id: CommentId,
        voter: VoterIdentity,
        direction: VoteDirection,
    ) -> bool:
        """Check whether a voter cast a vote in the given direction.

        Args:
            comment_id: ID of the comment
            voter: Account or session identity of the voter
            direction: Up or down

        Returns:
            True if a matching vote exists
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a new vote or update an existing one by ID.

        A vote without an ID is inserted and returned with its new ID.
        A vote with an ID overwrites the stored row with that ID.

        Args:
            vote: The vote to save

        Returns:
            The vote as stored

        Raises:
            NotFoundError: If the vote has an ID that does not exist
            IntegrityError: If the voter already has another vote on the comment
        """
        pass

    @abstractmethod
    async def delete_by_id(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
