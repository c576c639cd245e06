"""Remove vote use case."""

from pydantic import BaseModel

from tally.domain.service import VoterContext, VoteService
from tally.domain.value import CommentId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    comment_id: int


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    message: str


class RemoveVoteUseCase:
    """Use case for withdrawing the requesting voter's vote on a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(
        self, request: RemoveVoteRequest, context: VoterContext
    ) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request
            context: The requesting voter

        Returns:
            Remove vote response
        """
        vote = await self.vote_service.get_vote(CommentId(request.comment_id), context)
        if vote is None:
            return RemoveVoteResponse(
                success=False,
                message="No vote found to remove",
            )

        await self.vote_service.delete_vote(vote)
        return RemoveVoteResponse(
            success=True,
            message="Vote removed successfully",
        )
