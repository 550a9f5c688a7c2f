"""Fixtures with realistic TrainingPeaks API responses for testing."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from trainingpeaks_client.auth import AuthToken


@pytest.fixture
def make_response():
    """Factory for mock ``requests.Response`` objects."""

    def _make(status_code: int = 200, payload=None) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status_code
        resp.ok = status_code < 400
        resp.json.return_value = payload
        resp.content = b"" if payload is None else b"{}"
        resp.text = "" if payload is None else str(payload)
        return resp

    return _make


@pytest.fixture
def token_payload() -> dict:
    """Realistic /users/v3/token response."""
    return {
        "success": True,
        "token": {
            "access_token": "gAAAAABmabc123",
            "token_type": "bearer",
            "expires_in": 3600,
            "expires": "2099-01-15T12:00:00Z",
            "refresh_token": "refresh-xyz",
            "scope": "events:read events:write workouts:read workouts:write",
        },
    }


@pytest.fixture
def valid_token() -> AuthToken:
    return AuthToken(
        access_token="gAAAAABmabc123",
        token_type="bearer",
        expires=datetime.now(timezone.utc) + timedelta(hours=1),
        refresh_token="refresh-xyz",
    )


@pytest.fixture
def expired_token() -> AuthToken:
    return AuthToken(
        access_token="stale",
        token_type="bearer",
        expires=datetime.now(timezone.utc) - timedelta(hours=1),
    )


@pytest.fixture
def user_payload() -> dict:
    """Realistic /users/v3/user response (trimmed)."""
    return {
        "user": {
            "userId": 1234567,
            "firstName": "Ana",
            "lastName": "Runner",
            "email": "ana@example.com",
            "athletes": [{"athleteId": 1234567, "firstName": "Ana"}],
        }
    }


@pytest.fixture
def mock_http() -> MagicMock:
    """A mock ``requests.Session``."""
    session = MagicMock()
    session.headers = {}
    return session
