"""Mappers between database rows and domain models."""

from typing import Any, Dict

from tally.domain.model import Vote
from tally.domain.value import (
    AccountId,
    AccountVoter,
    CommentId,
    SessionToken,
    SessionVoter,
    VoteDirection,
    VoteId,
    VoterIdentity,
)


def row_to_voter(row: Dict[str, Any]) -> VoterIdentity:
    """Build the voter identity stored on a vote row."""
    if row["user_id"] is not None:
        return AccountVoter(account_id=AccountId(row["user_id"]))
    return SessionVoter(session_token=SessionToken(row["session_id"]))


def voter_to_dict(voter: VoterIdentity | None) -> Dict[str, Any]:
    """Split a voter identity into the user_id/session_id column pair."""
    if voter is None:
        return {"user_id": None, "session_id": None}
    if isinstance(voter, AccountVoter):
        return {"user_id": voter.account_id, "session_id": None}
    return {"user_id": None, "session_id": voter.session_token.root}


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model

    Raises:
        ValueError: If the row's upvote/downvote flags are both set or both unset
    """
    direction = VoteDirection.from_flags(row["upvote"], row["downvote"])
    if direction is None:
        raise ValueError(f"Vote {row['id']} has no single direction")

    return Vote(
        id=VoteId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        voter=row_to_voter(row),
        direction=direction,
        last_known_address=row.get("last_ip"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def vote_to_dict(vote: Vote, include_address: bool = False) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    The ID and timestamps are left to the database.

    Args:
        vote: Vote domain model
        include_address: Whether to write the requester address

    Returns:
        Dict suitable for database insertion/update
    """
    upvote, downvote = vote.direction.to_flags() if vote.direction else (False, False)

    values: Dict[str, Any] = {
        "comment_id": vote.comment_id,
        **voter_to_dict(vote.voter),
        "upvote": upvote,
        "downvote": downvote,
    }
    if include_address:
        values["last_ip"] = vote.last_known_address
    return values
