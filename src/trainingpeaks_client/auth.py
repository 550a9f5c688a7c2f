"""TrainingPeaks authentication helpers.

TrainingPeaks issues API bearer tokens in exchange for the web session
cookie (``Production_tpAuth``). These helpers perform that exchange and
persist the token between runs with a clean error hierarchy.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import requests

from trainingpeaks_client.exceptions import TrainingPeaksAuthError

logger = logging.getLogger(__name__)

API_BASE_URL: str = os.environ.get(
    "TRAININGPEAKS_API_BASE_URL", "https://tpapi.trainingpeaks.com"
).rstrip("/")
REQUEST_TIMEOUT_S: float = float(os.environ.get("TRAININGPEAKS_TIMEOUT", "30"))

AUTH_COOKIE_NAME = "Production_tpAuth"
TOKEN_FILENAME = "token.json"

_DEFAULT_TOKEN_DIR = Path("~/.trainingpeaks").expanduser()
_DEFAULT_REFRESH_WINDOW = timedelta(minutes=5)
_APP_ORIGIN = "https://app.trainingpeaks.com"


@dataclass(frozen=True)
class AuthToken:
    """Bearer token issued by ``/users/v3/token``."""

    access_token: str
    token_type: str
    expires: datetime
    refresh_token: Optional[str] = None

    def is_expired(
        self,
        now: datetime | None = None,
        refresh_window: timedelta = _DEFAULT_REFRESH_WINDOW,
    ) -> bool:
        """True once *now* is within *refresh_window* of expiry."""
        now = now or datetime.now(timezone.utc)
        return now >= self.expires - refresh_window

    @property
    def authorization_header(self) -> str:
        return f"{self.token_type.capitalize()} {self.access_token}"

    def to_dict(self) -> dict:
        return {
            "access_token": self.access_token,
            "token_type": self.token_type,
            "expires": self.expires.isoformat(),
            "refresh_token": self.refresh_token,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AuthToken:
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "bearer"),
            expires=_parse_datetime(data["expires"]),
            refresh_token=data.get("refresh_token"),
        )

    @classmethod
    def from_response(cls, payload: dict, now: datetime | None = None) -> AuthToken:
        """Build a token from the ``/users/v3/token`` response body.

        Expiry comes from ``expires`` when present, else ``now + expires_in``.
        """
        if not isinstance(payload, dict) or not payload.get("success", True):
            raise TrainingPeaksAuthError("Token exchange was not successful")
        token = payload.get("token")
        if not token or "access_token" not in token:
            raise TrainingPeaksAuthError("Token exchange returned no access token")

        if token.get("expires"):
            expires = _parse_datetime(token["expires"])
        else:
            now = now or datetime.now(timezone.utc)
            expires = now + timedelta(seconds=int(token.get("expires_in", 0)))

        return cls(
            access_token=token["access_token"],
            token_type=token.get("token_type", "bearer"),
            expires=expires,
            refresh_token=token.get("refresh_token"),
        )


def fetch_token(
    auth_cookie: str,
    session: requests.Session | None = None,
    base_url: str = API_BASE_URL,
    timeout: float = REQUEST_TIMEOUT_S,
) -> AuthToken:
    """Exchange the TrainingPeaks session cookie for an API token.

    *auth_cookie* may be the bare cookie value or a full ``name=value``
    cookie string.
    """
    if not auth_cookie:
        raise TrainingPeaksAuthError("No TrainingPeaks auth cookie provided")
    if "=" not in auth_cookie:
        auth_cookie = f"{AUTH_COOKIE_NAME}={auth_cookie}"

    http = session or requests.Session()
    try:
        resp = http.get(
            f"{base_url}/users/v3/token",
            headers={
                "Accept": "application/json",
                "Origin": _APP_ORIGIN,
                "Referer": f"{_APP_ORIGIN}/",
                "Cookie": auth_cookie,
            },
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise TrainingPeaksAuthError(f"Token exchange failed: {exc}") from exc

    if resp.status_code in (401, 403):
        raise TrainingPeaksAuthError(
            f"Token exchange rejected (HTTP {resp.status_code}); the auth cookie is invalid or expired"
        )
    if not resp.ok:
        raise TrainingPeaksAuthError(f"Token exchange failed (HTTP {resp.status_code})")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TrainingPeaksAuthError("Token exchange returned invalid JSON") from exc

    token = AuthToken.from_response(payload)
    logger.info("Obtained TrainingPeaks token (expires %s)", token.expires.isoformat())
    return token


def save_token(token: AuthToken, token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> Path:
    """Persist *token* to ``token.json`` in *token_dir*; returns the file path."""
    token_dir = Path(token_dir)
    token_dir.mkdir(parents=True, exist_ok=True)
    path = token_dir / TOKEN_FILENAME
    path.write_text(json.dumps(token.to_dict(), indent=2))
    logger.debug("Saved token to %s", path)
    return path


def load_token(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> AuthToken | None:
    """Load a saved token, or ``None`` if none was saved.

    Raises ``TrainingPeaksAuthError`` if the file exists but is unreadable.
    """
    path = Path(token_dir) / TOKEN_FILENAME
    if not path.exists():
        return None
    try:
        return AuthToken.from_dict(json.loads(path.read_text()))
    except (ValueError, KeyError, TypeError) as exc:
        raise TrainingPeaksAuthError(f"Corrupt token file at {path}: {exc}") from exc


def create_session(
    auth_cookie: str | None,
    token_dir: Path | str = _DEFAULT_TOKEN_DIR,
    session: requests.Session | None = None,
) -> AuthToken:
    """Return a usable API token.

    Two-phase login:
    1. If a saved, unexpired token exists, reuse it (no network).
    2. Otherwise exchange *auth_cookie* for a fresh token and save it.
    """
    token_dir = Path(token_dir)

    # Phase 1: saved token
    try:
        saved = load_token(token_dir)
    except TrainingPeaksAuthError:
        logger.warning("Ignoring unreadable token file in %s", token_dir)
        saved = None
    if saved is not None and not saved.is_expired():
        logger.info("Resumed session from saved token at %s", token_dir)
        return saved
    if saved is not None:
        logger.info("Saved token expired, exchanging auth cookie")

    # Phase 2: cookie exchange
    if not auth_cookie:
        raise TrainingPeaksAuthError(
            "No valid saved token and no auth cookie; set TRAININGPEAKS_AUTH_COOKIE"
        )
    token = fetch_token(auth_cookie, session=session)
    save_token(token, token_dir)
    logger.info("Logged in with auth cookie and saved token to %s", token_dir)
    return token


def resume_session(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> AuthToken:
    """Return the saved token (no cookie needed).

    Raises ``TrainingPeaksAuthError`` if the token is missing or expired.
    """
    token = load_token(token_dir)
    if token is None:
        raise TrainingPeaksAuthError(f"No saved token at {token_dir}")
    if token.is_expired():
        raise TrainingPeaksAuthError(f"Saved token at {token_dir} has expired")
    return token


def is_authenticated(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> bool:
    """Return True if a valid token exists at *token_dir*."""
    try:
        resume_session(token_dir)
        return True
    except TrainingPeaksAuthError:
        return False


def clear_tokens(token_dir: Path | str = _DEFAULT_TOKEN_DIR) -> None:
    """Delete the saved token."""
    path = Path(token_dir) / TOKEN_FILENAME
    if path.exists():
        path.unlink()
        logger.info("Cleared token at %s", path)


def _parse_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
