"""TrainingPeaks API client: all TrainingPeaks network I/O lives here."""

from trainingpeaks_client.auth import AuthToken
from trainingpeaks_client.client import TrainingPeaksClient
from trainingpeaks_client.exceptions import (
    TrainingPeaksAPIError,
    TrainingPeaksAuthError,
    TrainingPeaksClientError,
    TrainingPeaksNotFoundError,
    TrainingPeaksRateLimitError,
)

__all__ = [
    "AuthToken",
    "TrainingPeaksClient",
    "TrainingPeaksAPIError",
    "TrainingPeaksAuthError",
    "TrainingPeaksClientError",
    "TrainingPeaksNotFoundError",
    "TrainingPeaksRateLimitError",
]
