"""Environment-variable-based configuration for the workout uploader."""

from __future__ import annotations

import os
from pathlib import Path

AUTH_COOKIE: str = os.environ.get("TRAININGPEAKS_AUTH_COOKIE", "")
TOKEN_DIR: Path = Path(os.environ.get("TRAININGPEAKS_TOKEN_DIR", "~/.trainingpeaks")).expanduser()
ATHLETE_ID: int | None = (
    int(os.environ["TRAININGPEAKS_ATHLETE_ID"])
    if os.environ.get("TRAININGPEAKS_ATHLETE_ID")
    else None
)
WORKOUT_TYPE: int = int(os.environ.get("TRAININGPEAKS_WORKOUT_TYPE", "2"))  # 2 = bike
