"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class VoterIdentityError(DomainError):
    """Raised when neither an account nor a session identifies the voter."""

    def __init__(self) -> None:
        super().__init__("Cannot resolve voter: no account and no session")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
