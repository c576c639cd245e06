"""Account token service."""

import logfire

from tally.config import AuthSettings
from tally.domain.value import AccountId
from tally.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Mints and reads the `auth_token` JWT that identifies account voters."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, account_id: AccountId) -> str:
        with logfire.span("jwt_service.create_token", account_id=account_id):
            return create_token(account_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Account token rejected", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> AccountId | None:
        """Read the account behind a token, if any.

        Anyone may vote, so a missing or bad token is not an error: the
        request simply proceeds as an anonymous voter.

        Args:
            token: Value of the `auth_token` cookie

        Returns:
            The account ID, or None when the voter is anonymous
        """
        if not token:
            return None

        try:
            return AccountId(self.verify_token(token).account_id)
        except JWTError:
            logfire.debug("Invalid account token, voting anonymously")
            return None
