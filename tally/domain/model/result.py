"""Outcome types for vote persistence."""

from tally.domain.model.vote import Vote
from tally.domain.value.common import ValueObject


class ValidationFailure(ValueObject):
    """Reasons a vote was rejected before reaching the store.

    Errors are keyed by the offending field.
    """

    errors: dict[str, list[str]]

    @property
    def message(self) -> str:
        """Flatten errors into a single human readable message."""
        return "; ".join(
            f"{field}: {error}"
            for field, messages in self.errors.items()
            for error in messages
        )


class SaveVoteResult(ValueObject):
    """Result of saving a vote: the persisted vote or a validation failure."""

    vote: Vote | None = None
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
