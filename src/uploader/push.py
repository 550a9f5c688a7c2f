"""Workout uploader: converts a structured workout and pushes it to TrainingPeaks.

Usage:
    python -m uploader.push --template interval --dry-run
    python -m uploader.push --file workout.json --title "Threshold" --date 2026-10-20
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from trainingpeaks_client import TrainingPeaksClient, TrainingPeaksClientError
from workout_structure.builders.presets import (
    IntervalWorkoutConfig,
    create_cycling_workout_structure,
    create_simple_interval_structure,
)
from workout_structure.converter import convert_to_complete_structure
from workout_structure.errors import WorkoutStructureError
from workout_structure.models import WorkoutStructure, normalize_structure
from workout_structure.serialization import (
    simple_structure_from_dict,
    to_trainingpeaks_json_string,
)

from uploader.config import ATHLETE_ID, AUTH_COOKIE, TOKEN_DIR, WORKOUT_TYPE

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_CONFIG = IntervalWorkoutConfig(
    interval_duration=4,
    recovery_duration=2,
    number_of_intervals=5,
    interval_intensity=(95, 105),
    recovery_intensity=(60, 70),
)

TEMPLATE_TITLES = {
    "interval": "5x4min Intervals",
    "cycling": "Sweet Spot + VO2Max",
}


def load_structure(file_path: Path | None, template: str | None) -> WorkoutStructure:
    """Load a simple structure file or a named template as a complete structure."""
    if file_path is not None:
        with open(file_path) as f:
            simple = simple_structure_from_dict(json.load(f))
        return convert_to_complete_structure(normalize_structure(simple))
    if template == "cycling":
        return create_cycling_workout_structure()
    return convert_to_complete_structure(
        create_simple_interval_structure(DEFAULT_INTERVAL_CONFIG)
    )


def push(
    structure: WorkoutStructure,
    title: str,
    workout_day: date,
    client: TrainingPeaksClient | None = None,
) -> int:
    """Create *structure* as a planned workout. Returns the workoutId."""
    client = client or TrainingPeaksClient(auth_cookie=AUTH_COOKIE, token_dir=TOKEN_DIR)
    athlete_id = ATHLETE_ID or client.get_athlete_id()
    return client.create_structured_workout(
        athlete_id=athlete_id,
        title=title,
        workout_day=workout_day,
        structure=structure,
        workout_type_value_id=WORKOUT_TYPE,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Push a structured workout to TrainingPeaks")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path, help="Simple workout structure JSON file")
    source.add_argument(
        "--template", choices=sorted(TEMPLATE_TITLES), help="Built-in workout template"
    )
    parser.add_argument("--title", help="Workout title")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Workout day (YYYY-MM-DD, default today)",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Print TrainingPeaks JSON instead of uploading"
    )
    args = parser.parse_args(argv)

    try:
        structure = load_structure(args.file, args.template)
    except (OSError, ValueError, WorkoutStructureError) as exc:
        logger.error("Failed to load workout structure: %s", exc)
        return 1
    logger.info("Loaded %s", structure)

    if args.dry_run:
        print(to_trainingpeaks_json_string(structure))
        return 0

    title = args.title or (args.file.stem if args.file else TEMPLATE_TITLES[args.template])
    workout_day = args.date or date.today()
    try:
        workout_id = push(structure, title, workout_day)
    except TrainingPeaksClientError as exc:
        logger.error("Failed to push workout: %s", exc)
        return 1

    logger.info("Pushed '%s' for %s as workout %d", title, workout_day.isoformat(), workout_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
