"""Unit tests for RemoveVoteUseCase."""

import pytest

from tally.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
)
from tally.domain.service import VoteService
from tests.conftest import anonymous_context
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRemoveVoteUseCase:
    """Tests for RemoveVoteUseCase."""

    @pytest.mark.asyncio
    async def test_remove_existing_vote(self, unit_env):
        """Voter's own vote should be removed."""
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        remove_vote = await unit_env.get(RemoveVoteUseCase)
        vote_service = await unit_env.get(VoteService)
        context = anonymous_context("token-a")
        await cast_vote.execute(CastVoteRequest(comment_id=42, upvote=True), context)

        # Act
        response = await remove_vote.execute(RemoveVoteRequest(comment_id=42), context)

        # Assert
        assert response.success is True
        assert response.message == "Vote removed successfully"
        assert await vote_service.count_votes(42) == 0

    @pytest.mark.asyncio
    async def test_remove_without_vote(self, unit_env):
        """Removing when no vote exists should report failure."""
        # Arrange
        remove_vote = await unit_env.get(RemoveVoteUseCase)

        # Act
        response = await remove_vote.execute(
            RemoveVoteRequest(comment_id=42), anonymous_context("token-a")
        )

        # Assert
        assert response.success is False
        assert response.message == "No vote found to remove"

    @pytest.mark.asyncio
    async def test_remove_leaves_other_voters_alone(self, unit_env):
        """Only the requesting voter's vote should be removed."""
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        remove_vote = await unit_env.get(RemoveVoteUseCase)
        vote_service = await unit_env.get(VoteService)
        mine = anonymous_context("token-a")
        theirs = anonymous_context("token-b")
        await cast_vote.execute(CastVoteRequest(comment_id=42, upvote=True), mine)
        await cast_vote.execute(CastVoteRequest(comment_id=42, upvote=True), theirs)

        # Act
        await remove_vote.execute(RemoveVoteRequest(comment_id=42), mine)

        # Assert
        assert await vote_service.count_votes(42) == 1
        assert await vote_service.has_upvoted(42, theirs)
