"""JWT helpers for account voters.

Accounts sign in elsewhere; this service only needs to mint tokens for
tests and tooling, and to read the account ID back out of a cookie.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from tally.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an account token."""

    account_id: int
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Raised when a token cannot be trusted."""

    pass


def create_token(account_id: int, settings: AuthSettings) -> str:
    """Sign a token identifying an account.

    Args:
        account_id: Account ID
        settings: Authentication settings (secret, algorithm, lifetime)

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "account_id": account_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired, malformed or wrongly signed
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload(**claims)
    except ValidationError as e:
        raise JWTError("Token is missing account claims") from e
