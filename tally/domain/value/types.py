"""Domain value objects for comment voting.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from tally.domain.value.common import RootValueObject, ValueObject
from tally.domain.value.identifiers import AccountId


class VoteDirection(str, Enum):
    """Stance of a vote.

    A closed two-valued set: there is no "no vote" direction, the absence
    of a vote record means the voter has not voted.
    """

    UP = "up"
    DOWN = "down"

    @classmethod
    def from_flags(cls, upvote: bool, downvote: bool) -> "VoteDirection | None":
        """Map the legacy upvote/downvote flag pair onto a direction.

        Returns:
            The direction, or None when neither or both flags are set
        """
        if upvote == downvote:
            return None
        return cls.UP if upvote else cls.DOWN

    def to_flags(self) -> tuple[bool, bool]:
        """Return the (upvote, downvote) flag pair for this direction."""
        return self is VoteDirection.UP, self is VoteDirection.DOWN


class SessionToken(RootValueObject[str]):
    """Opaque token identifying an anonymous voter for one browsing session."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Session token must be 1-255 characters")
        return v


class AccountVoter(ValueObject):
    """Voter identified by an authenticated account."""

    kind: Literal["account"] = "account"
    account_id: AccountId


class SessionVoter(ValueObject):
    """Anonymous voter identified by their session token."""

    kind: Literal["session"] = "session"
    session_token: SessionToken


# Tagged union: a voter is either an account or a session, never both
VoterIdentity = Annotated[
    Union[AccountVoter, SessionVoter], Field(discriminator="kind")
]
