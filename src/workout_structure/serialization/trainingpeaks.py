"""TrainingPeaks JSON serialization for workout structures.

Converts WorkoutStructure → the camelCase structure document accepted by the
TrainingPeaks workouts API, and parses both that document and the simple
(untimed) authoring format back into models.

The wire format only knows three length units (``second``, ``meter``,
``repetition``). Lengths in any other unit are rejected on the way out:
run ``normalize_structure`` on the simple structure before converting it,
so that ``begin``/``end`` and lengths agree.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import json

from workout_structure.errors import StructureValidationError
from workout_structure.models.element import (
    CompleteStructureElement,
    SimpleStructureElement,
)
from workout_structure.models.enums import WIRE_UNITS
from workout_structure.models.length import WorkoutLength
from workout_structure.models.step import WorkoutStep
from workout_structure.models.structure import SimpleWorkoutStructure, WorkoutStructure
from workout_structure.models.target import WorkoutTarget


def to_trainingpeaks_json(structure: WorkoutStructure) -> dict:
    """Convert a WorkoutStructure to a TrainingPeaks-compatible dict.

    Raises:
        StructureValidationError: if an element or step length is not in
            seconds, meters or repetitions.
    """
    return {
        "structure": [_element_to_dict(element) for element in structure.structure],
        "polyline": [list(point) for point in structure.polyline],
        "primaryLengthMetric": structure.primary_length_metric.value,
        "primaryIntensityMetric": structure.primary_intensity_metric.value,
        "primaryIntensityTargetOrRange": structure.primary_intensity_target_or_range.value,
    }


def to_trainingpeaks_json_string(structure: WorkoutStructure, indent: int = 2) -> str:
    """Convert a WorkoutStructure to a TrainingPeaks-compatible JSON string."""
    return json.dumps(to_trainingpeaks_json(structure), indent=indent)


def structure_from_trainingpeaks_json(data: dict) -> WorkoutStructure:
    """Parse a TrainingPeaks structure document.

    Raises:
        StructureValidationError: on missing keys or invalid values.
    """
    try:
        return WorkoutStructure(
            structure=tuple(
                CompleteStructureElement(
                    type=item["type"],
                    length=_length_from_dict(item["length"]),
                    steps=tuple(_step_from_dict(step) for step in item.get("steps", [])),
                    begin=item["begin"],
                    end=item["end"],
                    polyline=item.get("polyline", ()),
                )
                for item in data["structure"]
            ),
            polyline=data.get("polyline", ()),
            primary_length_metric=data["primaryLengthMetric"],
            primary_intensity_metric=data["primaryIntensityMetric"],
            primary_intensity_target_or_range=data["primaryIntensityTargetOrRange"],
        )
    except KeyError as exc:
        raise StructureValidationError(
            f"Workout structure document is missing field {exc}"
        ) from exc
    except TypeError as exc:
        raise StructureValidationError(
            f"Malformed workout structure document: {exc}"
        ) from exc


def simple_structure_from_dict(data: dict) -> SimpleWorkoutStructure:
    """Parse the simple (untimed) authoring format.

    Only ``structure`` is required; metric fields fall back to the
    SimpleWorkoutStructure defaults.

    Raises:
        StructureValidationError: on missing keys or invalid values.
    """
    defaults = SimpleWorkoutStructure()
    try:
        elements = tuple(
            SimpleStructureElement(
                type=item["type"],
                length=_length_from_dict(item["length"]),
                steps=tuple(_step_from_dict(step) for step in item.get("steps", [])),
            )
            for item in data["structure"]
        )
    except KeyError as exc:
        raise StructureValidationError(
            f"Simple workout structure is missing field {exc}"
        ) from exc
    except TypeError as exc:
        raise StructureValidationError(
            f"Malformed simple workout structure: {exc}"
        ) from exc

    return SimpleWorkoutStructure(
        structure=elements,
        primary_length_metric=data.get(
            "primaryLengthMetric", defaults.primary_length_metric
        ),
        primary_intensity_metric=data.get(
            "primaryIntensityMetric", defaults.primary_intensity_metric
        ),
        intensity_target_type=data.get(
            "intensityTargetType", defaults.intensity_target_type
        ),
    )


def simple_structure_to_dict(simple: SimpleWorkoutStructure) -> dict:
    """Inverse of :func:`simple_structure_from_dict`; lengths keep their units."""
    return {
        "structure": [
            {
                "type": element.type.value,
                "length": _length_to_dict(element.length),
                "steps": [_step_to_dict(step, wire=False) for step in element.steps],
            }
            for element in simple.structure
        ],
        "primaryLengthMetric": simple.primary_length_metric.value,
        "primaryIntensityMetric": simple.primary_intensity_metric.value,
        "intensityTargetType": simple.intensity_target_type.value,
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _element_to_dict(element: CompleteStructureElement) -> dict:
    return {
        "type": element.type.value,
        "length": _length_to_dict(_wire_length(element.length)),
        "steps": [_step_to_dict(step) for step in element.steps],
        "begin": element.begin,
        "end": element.end,
    }


def _step_to_dict(step: WorkoutStep, wire: bool = True) -> dict:
    length = _wire_length(step.length) if wire else step.length
    return {
        "name": step.name,
        "length": _length_to_dict(length),
        "targets": [
            {"minValue": target.min_value, "maxValue": target.max_value}
            for target in step.targets
        ],
        "intensityClass": step.intensity_class.value,
        "openDuration": step.open_duration,
    }


def _wire_length(length: WorkoutLength) -> WorkoutLength:
    if length.unit not in WIRE_UNITS:
        raise StructureValidationError(
            f"Length {length} is not in wire units (second, meter, repetition)"
        )
    return length


def _length_to_dict(length: WorkoutLength) -> dict:
    return {"value": length.value, "unit": length.unit.value}


def _length_from_dict(data: dict) -> WorkoutLength:
    return WorkoutLength(value=data["value"], unit=data["unit"])


def _step_from_dict(data: dict) -> WorkoutStep:
    return WorkoutStep(
        name=data["name"],
        length=_length_from_dict(data["length"]),
        targets=tuple(
            WorkoutTarget(min_value=target["minValue"], max_value=target["maxValue"])
            for target in data["targets"]
        ),
        intensity_class=data["intensityClass"],
        open_duration=data.get("openDuration", False),
    )
