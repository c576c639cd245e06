"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class SessionNotWritableError(InterfaceError):
    """Raised when a new session token is set with no response to carry it."""

    pass
