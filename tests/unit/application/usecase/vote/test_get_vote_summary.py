"""Unit tests for GetVoteSummaryUseCase."""

import pytest
from pydantic import ValidationError

from tally.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
)
from tally.config import VotingSettings
from tally.domain.service import VoteService
from tally.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import account_context, anonymous_context
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetVoteSummaryUseCase:
    """Tests for GetVoteSummaryUseCase."""

    @pytest.mark.asyncio
    async def test_summary_counts_and_own_vote(self, unit_env):
        """Summary should report tallies and the caller's direction."""
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        get_summary = await unit_env.get(GetVoteSummaryUseCase)
        me = anonymous_context("token-a")
        await cast_vote.execute(CastVoteRequest(comment_id=42, downvote=True), me)
        await cast_vote.execute(
            CastVoteRequest(comment_id=42, upvote=True), account_context(1)
        )

        # Act
        summary = await get_summary.execute(GetVoteSummaryRequest(comment_id=42), me)

        # Assert
        assert summary.votes == 2
        assert summary.upvotes == 1
        assert summary.downvotes == 1
        assert summary.has_upvoted is False
        assert summary.has_downvoted is True

    @pytest.mark.asyncio
    async def test_explicit_threshold(self, unit_env):
        """Explicit threshold should be compared against downvotes."""
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        get_summary = await unit_env.get(GetVoteSummaryUseCase)
        for account_id in (1, 2):
            await cast_vote.execute(
                CastVoteRequest(comment_id=42, downvote=True),
                account_context(account_id),
            )

        # Act
        reached = await get_summary.execute(
            GetVoteSummaryRequest(comment_id=42, threshold=2), anonymous_context()
        )
        not_reached = await get_summary.execute(
            GetVoteSummaryRequest(comment_id=42, threshold=3), anonymous_context()
        )

        # Assert
        assert reached.over_threshold is True
        assert not_reached.over_threshold is False

    @pytest.mark.asyncio
    async def test_default_threshold_from_settings(self):
        """Without a threshold the configured downvote limit applies."""
        # Arrange
        vote_service = VoteService(InMemoryVoteRepository())
        get_summary = GetVoteSummaryUseCase(
            vote_service=vote_service,
            voting_settings=VotingSettings(downvote_comment_limit=1),
        )
        await CastVoteUseCase(vote_service).execute(
            CastVoteRequest(comment_id=42, downvote=True), account_context(1)
        )

        # Act
        summary = await get_summary.execute(
            GetVoteSummaryRequest(comment_id=42), anonymous_context()
        )

        # Assert
        assert summary.over_threshold is True

    def test_negative_threshold_is_rejected(self):
        """Threshold must not be negative."""
        with pytest.raises(ValidationError):
            GetVoteSummaryRequest(comment_id=42, threshold=-1)
