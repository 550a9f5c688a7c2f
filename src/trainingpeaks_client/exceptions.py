"""Custom exception hierarchy for the TrainingPeaks client."""

from __future__ import annotations


class TrainingPeaksClientError(Exception):
    """Base exception for all trainingpeaks_client errors."""


class TrainingPeaksAuthError(TrainingPeaksClientError):
    """Authentication failed (missing cookie, rejected or expired token)."""


class TrainingPeaksAPIError(TrainingPeaksClientError):
    """A TrainingPeaks API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TrainingPeaksRateLimitError(TrainingPeaksAPIError):
    """HTTP 429: too many requests."""

    def __init__(self, message: str = "Rate limited by TrainingPeaks") -> None:
        super().__init__(message, status_code=429)


class TrainingPeaksNotFoundError(TrainingPeaksAPIError):
    """HTTP 404: the requested resource does not exist."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)
