"""Cookie-backed session for anonymous voters."""

from fastapi import Request, Response

from tally.domain.service import SessionStore
from tally.interface.error import SessionNotWritableError


class CookieSession(SessionStore):
    """Session store reading request cookies and writing response cookies.

    Values set during the request are visible to later reads in the same
    request, so a token generated once is reused for the rest of it.
    """

    def __init__(
        self,
        request: Request,
        response: Response | None = None,
        max_age: int | None = None,
    ) -> None:
        self.request = request
        self.response = response
        self.max_age = max_age
        self._pending: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if key in self._pending:
            return self._pending[key]
        return self.request.cookies.get(key)

    def set(self, key: str, value: str) -> None:
        if self.response is None:
            raise SessionNotWritableError(f"Cannot set session key {key!r}")

        self._pending[key] = value
        self.response.set_cookie(
            key,
            value,
            max_age=self.max_age,
            httponly=True,
            samesite="lax",
            secure=self.request.url.scheme == "https",
        )
