"""Unit tests for vote value objects."""

import pytest
from pydantic import TypeAdapter, ValidationError

from tally.domain.value import (
    AccountVoter,
    SessionToken,
    SessionVoter,
    VoteDirection,
    VoterIdentity,
)


class TestVoteDirection:
    """Tests for VoteDirection flag mapping."""

    @pytest.mark.parametrize(
        "upvote,downvote,expected",
        [
            (True, False, VoteDirection.UP),
            (False, True, VoteDirection.DOWN),
            (True, True, None),
            (False, False, None),
        ],
    )
    def test_from_flags(self, upvote, downvote, expected):
        """Exactly one flag should select a direction."""
        assert VoteDirection.from_flags(upvote, downvote) is expected

    def test_to_flags(self):
        """Directions should map back onto the flag pair."""
        assert VoteDirection.UP.to_flags() == (True, False)
        assert VoteDirection.DOWN.to_flags() == (False, True)


class TestSessionToken:
    """Tests for SessionToken validation."""

    def test_empty_token_is_rejected(self):
        """Empty token should fail validation."""
        with pytest.raises(ValidationError):
            SessionToken("")

    def test_overlong_token_is_rejected(self):
        """Token longer than 255 characters should fail validation."""
        with pytest.raises(ValidationError):
            SessionToken("x" * 256)


class TestVoterIdentity:
    """Tests for the voter identity union."""

    def test_discriminates_on_kind(self):
        """Raw data should parse into the matching voter variant."""
        adapter = TypeAdapter(VoterIdentity)

        account = adapter.validate_python({"kind": "account", "account_id": 3})
        session = adapter.validate_python({"kind": "session", "session_token": "abc"})

        assert account == AccountVoter(account_id=3)
        assert session == SessionVoter(session_token=SessionToken("abc"))

    def test_account_and_session_voters_differ(self):
        """Voters of different kinds are never equal."""
        assert AccountVoter(account_id=3) != SessionVoter(session_token="3")
