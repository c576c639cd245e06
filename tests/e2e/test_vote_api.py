"""End-to-end tests for vote endpoints."""

import pytest
from fastapi.testclient import TestClient

from tally.config import Settings
from tally.domain.service import JWTService
from tally.domain.value import AccountId
from tally.interface.api.app import create_app
from tests.conftest import SESSION_KEY
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


def _auth_token(account_id: int) -> str:
    return JWTService(Settings().auth).create_token(AccountId(account_id))


class TestVoteEndpoints:
    """End-to-end tests for vote API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_anonymous_vote_issues_session_cookie(self, client):
        """First anonymous vote should set the voter cookie."""
        # Act
        response = client.post("/comments/42/vote", json={"upvote": True})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["direction"] == "up"
        assert data["upvotes"] == 1
        assert client.cookies.get(SESSION_KEY)

    def test_anonymous_voter_changes_vote(self, client):
        """Cookie should tie the second vote to the first."""
        # Arrange
        first = client.post("/comments/42/vote", json={"upvote": True}).json()

        # Act
        response = client.post("/comments/42/vote", json={"downvote": True})

        # Assert
        data = response.json()
        assert data["vote_id"] == first["vote_id"]
        assert data["upvotes"] == 0
        assert data["downvotes"] == 1

    def test_new_client_is_a_different_voter(self, client):
        """A client without the cookie should count as a new voter."""
        # Arrange
        client.post("/comments/42/vote", json={"upvote": True})
        client.cookies.clear()

        # Act
        response = client.post("/comments/42/vote", json={"upvote": True})

        # Assert
        assert response.json()["upvotes"] == 2

    def test_both_flags_returns_422(self, client):
        """Upvote and downvote together should be rejected."""
        # Act
        response = client.post(
            "/comments/42/vote", json={"upvote": True, "downvote": True}
        )

        # Assert
        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert "direction" in data["errors"]

    def test_account_vote_and_summary(self, client):
        """Signed-in voter should see their own vote in the summary."""
        # Arrange
        client.cookies.set("auth_token", _auth_token(5))

        # Act
        client.post("/comments/42/vote", json={"downvote": True})
        response = client.get("/comments/42/votes", params={"threshold": 1})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["votes"] == 1
        assert data["downvotes"] == 1
        assert data["has_downvoted"] is True
        assert data["has_upvoted"] is False
        assert data["over_threshold"] is True

    def test_overlong_session_cookie_is_replaced(self, client):
        """Voter cookie too long to be a token should be reissued, not fail."""
        # Arrange
        client.cookies.set(SESSION_KEY, "x" * 300)

        # Act
        response = client.post("/comments/42/vote", json={"upvote": True})

        # Assert
        assert response.status_code == 200
        assert response.json()["success"] is True
        issued = response.cookies.get(SESSION_KEY)
        assert issued
        assert issued != "x" * 300

    def test_invalid_auth_token_votes_anonymously(self, client):
        """Bad token should fall back to anonymous voting."""
        # Arrange
        client.cookies.set("auth_token", "invalid-token")

        # Act
        response = client.post("/comments/42/vote", json={"upvote": True})

        # Assert
        assert response.status_code == 200
        assert client.cookies.get(SESSION_KEY)

    def test_remove_vote_twice(self, client):
        """Second removal should report there is nothing to remove."""
        # Arrange
        client.post("/comments/42/vote", json={"upvote": True})

        # Act
        first = client.delete("/comments/42/vote")
        second = client.delete("/comments/42/vote")

        # Assert
        assert first.json()["success"] is True
        assert second.json()["success"] is False
        assert second.json()["message"] == "No vote found to remove"

    def test_negative_threshold_returns_422(self, client):
        """Threshold query parameter must not be negative."""
        # Act
        response = client.get("/comments/42/votes", params={"threshold": -1})

        # Assert
        assert response.status_code == 422


class TestHealthEndpoint:
    """End-to-end tests for the health check."""

    def test_health(self, client):
        """Health check should report healthy."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "tally-backend"
