"""Test configuration and fixtures."""

from tally.adapter.session import InMemorySessionStore
from tally.domain.model import Vote
from tally.domain.service import VoterContext
from tally.domain.value import (
    AccountId,
    CommentId,
    SessionToken,
    SessionVoter,
    VoteDirection,
)

SESSION_KEY = "comments_vote"


def anonymous_context(
    token: str | None = None, address: str | None = None
) -> VoterContext:
    """Build a voter context for an anonymous voter.

    Args:
        token: Session token already stored in the session, if any
        address: Requester address

    Returns:
        Voter context backed by an in-memory session
    """
    values = {SESSION_KEY: token} if token else {}
    return VoterContext(session=InMemorySessionStore(values), address=address)


def account_context(account_id: int, address: str | None = None) -> VoterContext:
    """Build a voter context for a signed-in account."""
    return VoterContext(
        account_id=AccountId(account_id),
        session=InMemorySessionStore(),
        address=address,
    )


def make_vote(
    comment_id: int,
    direction: VoteDirection | None = VoteDirection.UP,
    session_token: str | None = None,
) -> Vote:
    """Build an unsaved vote, optionally pinned to an anonymous session."""
    voter = (
        SessionVoter(session_token=SessionToken(session_token))
        if session_token
        else None
    )
    return Vote(comment_id=CommentId(comment_id), direction=direction, voter=voter)
