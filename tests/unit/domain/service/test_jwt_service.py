"""Unit tests for JWTService."""

import pytest

from tally.config import AuthSettings
from tally.domain.service import JWTService
from tally.domain.value import AccountId
from tally.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    """Tests for token creation and account extraction."""

    def test_token_round_trip(self, jwt_service):
        """Created token should verify back to the same account."""
        token = jwt_service.create_token(AccountId(5))

        payload = jwt_service.verify_token(token)

        assert payload.account_id == 5

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        """Token from a different secret should not verify."""
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(AccountId(5))

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_invalid_token_means_anonymous(self, jwt_service, token):
        """Account lookup should return None rather than raise."""
        assert jwt_service.get_account_id_from_token(token) is None

    def test_account_id_from_valid_token(self, jwt_service):
        """Valid token should yield its account ID."""
        token = jwt_service.create_token(AccountId(9))

        assert jwt_service.get_account_id_from_token(token) == AccountId(9)
