"""Integration tests for PostgresVoteRepository.

These tests need a migrated PostgreSQL database reachable with the
settings loaded from the environment. Run them with `pytest -m integration`.
"""

import random

import pytest

from tally.domain.model import Vote
from tally.domain.repository import VoteRepository
from tally.domain.value import (
    AccountId,
    AccountVoter,
    CommentId,
    SessionToken,
    SessionVoter,
    VoteDirection,
)
from tests.harness import create_env_fixture

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def _comment_id() -> CommentId:
    # Requests commit, so keep each test on its own comment
    return CommentId(random.randint(1_000_000, 2_000_000_000))


@pytest.mark.integration
class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_insert_and_find_session_vote(self, integration_env):
        """Session token value object must be unwrapped for queries."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        comment_id = _comment_id()
        voter = SessionVoter(session_token=SessionToken("integration-token"))

        # Act
        saved = await vote_repo.upsert(
            Vote(comment_id=comment_id, voter=voter, direction=VoteDirection.UP)
        )
        found = await vote_repo.find_by_voter(comment_id, voter)

        # Assert
        assert saved.id is not None
        assert saved.created_at is not None
        assert found.id == saved.id
        assert found.voter == voter

    @pytest.mark.asyncio
    async def test_update_flips_direction(self, integration_env):
        """Updating by ID should change flags without a second row."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        comment_id = _comment_id()
        voter = AccountVoter(account_id=AccountId(1))
        saved = await vote_repo.upsert(
            Vote(comment_id=comment_id, voter=voter, direction=VoteDirection.UP)
        )

        # Act
        saved.direction = VoteDirection.DOWN
        await vote_repo.upsert(saved)

        # Assert
        assert await vote_repo.count_by_comment_id(comment_id) == 1
        assert (
            await vote_repo.count_by_comment_id_and_direction(
                comment_id, VoteDirection.DOWN
            )
            == 1
        )
        assert await vote_repo.exists_by_voter_and_direction(
            comment_id, voter, VoteDirection.DOWN
        )

    @pytest.mark.asyncio
    async def test_delete_by_id(self, integration_env):
        """Delete should report whether a row was removed."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        comment_id = _comment_id()
        saved = await vote_repo.upsert(
            Vote(
                comment_id=comment_id,
                voter=AccountVoter(account_id=AccountId(2)),
                direction=VoteDirection.UP,
            )
        )

        # Act & Assert
        assert await vote_repo.delete_by_id(saved.id) is True
        assert await vote_repo.delete_by_id(saved.id) is False
        assert await vote_repo.find_by_comment_id(comment_id) is None
