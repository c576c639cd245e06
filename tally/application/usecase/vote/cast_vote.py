"""Cast vote use case."""

from pydantic import BaseModel, Field

from tally.domain.model import Vote
from tally.domain.service import VoterContext, VoteService
from tally.domain.value import CommentId, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request.

    Mirrors the comment form, which posts an upvote or a downvote flag.
    Exactly one of them must be set.
    """

    comment_id: int
    upvote: bool = False
    downvote: bool = False


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool
    comment_id: int
    vote_id: int | None = None
    direction: VoteDirection | None = None
    upvotes: int
    downvotes: int
    errors: dict[str, list[str]] = Field(default_factory=dict)


class CastVoteUseCase:
    """Use case for casting or changing a vote on a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(
        self, request: CastVoteRequest, context: VoterContext
    ) -> CastVoteResponse:
        """Execute cast vote flow.

        A voter who already voted on the comment has their vote changed,
        everyone else gets a new vote.

        Args:
            request: Cast vote request
            context: The requesting voter

        Returns:
            Cast vote response with the comment's updated tallies
        """
        comment_id = CommentId(request.comment_id)

        vote = await self.vote_service.get_vote(comment_id, context)
        if vote is None:
            vote = Vote(comment_id=comment_id)
        vote.direction = VoteDirection.from_flags(request.upvote, request.downvote)

        result = await self.vote_service.save_vote(vote, context)

        upvotes = await self.vote_service.count_upvotes(comment_id)
        downvotes = await self.vote_service.count_downvotes(comment_id)

        if not result.ok:
            return CastVoteResponse(
                success=False,
                comment_id=comment_id,
                upvotes=upvotes,
                downvotes=downvotes,
                errors=result.failure.errors,
            )

        return CastVoteResponse(
            success=True,
            comment_id=comment_id,
            vote_id=result.vote.id,
            direction=result.vote.direction,
            upvotes=upvotes,
            downvotes=downvotes,
        )
