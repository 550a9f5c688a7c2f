"""High-level TrainingPeaks client facade.

All methods wrap raw HTTP calls with error handling and retry logic.
"""

from __future__ import annotations

import base64
import logging
import time
from datetime import date
from pathlib import Path
from typing import Any

import requests

from trainingpeaks_client.auth import (
    API_BASE_URL,
    REQUEST_TIMEOUT_S,
    AuthToken,
    create_session,
)
from trainingpeaks_client.exceptions import (
    TrainingPeaksAPIError,
    TrainingPeaksAuthError,
    TrainingPeaksNotFoundError,
    TrainingPeaksRateLimitError,
)
from workout_structure.models.structure import WorkoutStructure
from workout_structure.serialization import to_trainingpeaks_json

logger = logging.getLogger(__name__)

_DEFAULT_TOKEN_DIR = Path("~/.trainingpeaks").expanduser()
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2

WORKOUT_TYPE_BIKE = 2


class TrainingPeaksClient:
    """Facade for TrainingPeaks user and workout operations."""

    def __init__(
        self,
        auth_cookie: str | None = None,
        token_dir: Path | str = _DEFAULT_TOKEN_DIR,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_S,
        session: requests.Session | None = None,
    ) -> None:
        self._token_dir = Path(token_dir)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._token = create_session(
            auth_cookie=auth_cookie,
            token_dir=self._token_dir,
            session=self._session,
        )
        self._session.headers.update(
            {
                "Authorization": self._token.authorization_header,
                "Accept": "application/json",
            }
        )

    @classmethod
    def from_token(
        cls,
        token: AuthToken,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_S,
        session: requests.Session | None = None,
    ) -> "TrainingPeaksClient":
        """Construct from an already-obtained token (no token storage)."""
        obj = cls.__new__(cls)
        obj._token_dir = None
        obj._base_url = base_url.rstrip("/")
        obj._timeout = timeout
        obj._session = session or requests.Session()
        obj._token = token
        obj._session.headers.update(
            {
                "Authorization": token.authorization_header,
                "Accept": "application/json",
            }
        )
        return obj

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------

    def get_user(self) -> dict[str, Any]:
        """Return the authenticated user's profile (``user`` object)."""
        data = self._request("GET", "/users/v3/user")
        return data.get("user", data) if isinstance(data, dict) else {}

    def get_athlete_id(self) -> int:
        """Return the athlete id of the authenticated user."""
        user = self.get_user()
        athlete_id = user.get("userId") or user.get("athleteId")
        if athlete_id is None:
            raise TrainingPeaksAPIError(f"User profile has no athlete id: {user}")
        return int(athlete_id)

    # ------------------------------------------------------------------
    # Workout operations
    # ------------------------------------------------------------------

    def create_structured_workout(
        self,
        athlete_id: int,
        title: str,
        workout_day: date,
        structure: WorkoutStructure,
        workout_type_value_id: int = WORKOUT_TYPE_BIKE,
        description: str | None = None,
    ) -> int:
        """Create a planned workout with *structure* on *workout_day*.

        Returns the workoutId assigned by TrainingPeaks.
        """
        payload = {
            "athleteId": athlete_id,
            "title": title,
            "workoutTypeValueId": workout_type_value_id,
            "workoutDay": f"{workout_day.isoformat()}T00:00:00",
            "description": description,
            "totalTimePlanned": structure.total_duration() / 3600,
            "structure": to_trainingpeaks_json(structure),
        }
        resp = self._request(
            "POST", f"/fitness/v6/athletes/{athlete_id}/workouts", json=payload
        )
        workout_id = self._workout_id(resp, "create")
        logger.info("Created structured workout id=%d for %s", workout_id, workout_day)
        return workout_id

    def upload_workout(
        self,
        athlete_id: int,
        file_path: Path | str,
        workout_day: date | None = None,
    ) -> int:
        """Upload a workout file (FIT/TCX/GPX). Returns the workoutId."""
        file_path = Path(file_path)
        payload = {
            "athleteId": athlete_id,
            "fileName": file_path.name,
            "data": base64.b64encode(file_path.read_bytes()).decode("ascii"),
        }
        if workout_day is not None:
            payload["workoutDay"] = workout_day.isoformat()
        resp = self._request("POST", "/fitness/v6/workouts/upload", json=payload)
        workout_id = self._workout_id(resp, "upload")
        logger.info("Uploaded %s as workout id=%d", file_path.name, workout_id)
        return workout_id

    def get_workout(self, athlete_id: int, workout_id: int) -> dict | None:
        """Fetch one workout, or ``None`` if it does not exist."""
        try:
            return self._request("GET", f"/fitness/v6/workouts/{workout_id}")
        except TrainingPeaksNotFoundError:
            logger.info("Workout %d not found for athlete %d", workout_id, athlete_id)
            return None

    def list_workouts(
        self, athlete_id: int, start_date: date, end_date: date
    ) -> list[dict]:
        """List workouts between two dates (inclusive)."""
        path = (
            f"/fitness/v6/athletes/{athlete_id}/workouts/"
            f"{start_date.isoformat()}/{end_date.isoformat()}"
        )
        return self._request("GET", path) or []

    def delete_workout(self, athlete_id: int, workout_id: int) -> None:
        """Delete a workout from TrainingPeaks."""
        self._request("DELETE", f"/fitness/v6/workouts/{workout_id}")
        logger.info("Deleted workout %d for athlete %d", workout_id, athlete_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _workout_id(resp: Any, action: str) -> int:
        if isinstance(resp, dict) and resp.get("workoutId") is not None:
            return int(resp["workoutId"])
        raise TrainingPeaksAPIError(f"Unexpected {action} response: {resp}")

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request with retry + exponential backoff on 429.

        Returns the decoded JSON body, or ``None`` for an empty body.
        """
        url = f"{self._base_url}{path}"
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
            except requests.RequestException as exc:
                raise TrainingPeaksAPIError(f"{method} {path} failed: {exc}") from exc

            if resp.status_code == 429:
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Rate limited (attempt %d/%d), retrying in %ds",
                    attempt + 1,
                    _MAX_RETRIES,
                    wait,
                )
                time.sleep(wait)
                continue
            if resp.status_code in (401, 403):
                raise TrainingPeaksAuthError(
                    f"{method} {path} unauthorized (HTTP {resp.status_code})"
                )
            if resp.status_code == 404:
                raise TrainingPeaksNotFoundError(f"{method} {path} not found")
            if not resp.ok:
                raise TrainingPeaksAPIError(
                    f"{method} {path} failed: {resp.text}", status_code=resp.status_code
                )

            if not resp.content:
                return None
            try:
                return resp.json()
            except ValueError as exc:
                raise TrainingPeaksAPIError(
                    f"{method} {path} returned invalid JSON", status_code=resp.status_code
                ) from exc

        raise TrainingPeaksRateLimitError(
            f"Rate limited after {_MAX_RETRIES} retries: {method} {path}"
        )
