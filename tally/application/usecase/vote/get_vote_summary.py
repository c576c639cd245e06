"""Get vote summary use case."""

from pydantic import BaseModel, Field

from tally.config import VotingSettings
from tally.domain.service import VoterContext, VoteService
from tally.domain.value import CommentId


class GetVoteSummaryRequest(BaseModel):
    """Get vote summary request.

    The threshold comes from the comment's moderation settings when the
    caller knows it, otherwise the configured default applies.
    """

    comment_id: int
    threshold: int | None = Field(default=None, ge=0)


class VoteSummaryResponse(BaseModel):
    """Vote tallies for a comment, as seen by the requesting voter."""

    comment_id: int
    votes: int
    upvotes: int
    downvotes: int
    has_upvoted: bool
    has_downvoted: bool
    over_threshold: bool


class GetVoteSummaryUseCase:
    """Use case for reading a comment's vote tallies."""

    def __init__(
        self, vote_service: VoteService, voting_settings: VotingSettings
    ) -> None:
        """Initialize get vote summary use case.

        Args:
            vote_service: Vote domain service
            voting_settings: Voting configuration (default downvote limit)
        """
        self.vote_service = vote_service
        self.voting_settings = voting_settings

    async def execute(
        self, request: GetVoteSummaryRequest, context: VoterContext
    ) -> VoteSummaryResponse:
        """Execute get vote summary flow.

        Args:
            request: Get vote summary request
            context: The requesting voter

        Returns:
            Vote summary response
        """
        comment_id = CommentId(request.comment_id)
        threshold = (
            request.threshold
            if request.threshold is not None
            else self.voting_settings.downvote_comment_limit
        )

        return VoteSummaryResponse(
            comment_id=comment_id,
            votes=await self.vote_service.count_votes(comment_id),
            upvotes=await self.vote_service.count_upvotes(comment_id),
            downvotes=await self.vote_service.count_downvotes(comment_id),
            has_upvoted=await self.vote_service.has_upvoted(comment_id, context),
            has_downvoted=await self.vote_service.has_downvoted(comment_id, context),
            over_threshold=await self.vote_service.is_over_downvote_threshold(
                comment_id, threshold
            ),
        )
