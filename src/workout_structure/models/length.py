"""Workout length value object and unit conversions.

A length is a number plus a unit. The unit decides what the number can be
converted to: time units convert to seconds, distance units to meters, and
repetition counts to neither.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from workout_structure.errors import StructureValidationError
from workout_structure.models.enums import (
    DISTANCE_UNITS,
    METERS_PER_KILOMETER,
    METERS_PER_MILE,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TIME_UNITS,
    LengthUnit,
)

_SECONDS_FACTOR = {
    LengthUnit.SECOND: 1,
    LengthUnit.MINUTE: SECONDS_PER_MINUTE,
    LengthUnit.HOUR: SECONDS_PER_HOUR,
}

_METERS_FACTOR = {
    LengthUnit.METER: 1,
    LengthUnit.KILOMETER: METERS_PER_KILOMETER,
    LengthUnit.MILE: METERS_PER_MILE,
}


def format_quantity(value: float) -> str:
    """Render *value* as written, dropping a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def is_time_unit(unit: LengthUnit) -> bool:
    return unit in TIME_UNITS


def is_distance_unit(unit: LengthUnit) -> bool:
    return unit in DISTANCE_UNITS


def is_repetition_unit(unit: LengthUnit) -> bool:
    return unit == LengthUnit.REPETITION


def convert_to_seconds(value: float, unit: LengthUnit) -> float | None:
    """Convert a time length to seconds; ``None`` for distance/repetition units."""
    factor = _SECONDS_FACTOR.get(unit)
    if factor is None:
        return None
    return value * factor


def convert_to_meters(value: float, unit: LengthUnit) -> float | None:
    """Convert a distance length to meters; ``None`` for time/repetition units."""
    factor = _METERS_FACTOR.get(unit)
    if factor is None:
        return None
    return value * factor


@dataclass(frozen=True)
class WorkoutLength:
    """Duration, distance or repeat count of a step or structure element."""

    value: float
    unit: LengthUnit

    def __post_init__(self) -> None:
        try:
            unit = LengthUnit(self.unit)
        except ValueError:
            raise StructureValidationError(
                f"Invalid workout length unit: {self.unit}"
            ) from None
        object.__setattr__(self, "unit", unit)

        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise StructureValidationError(
                f"Workout length value must be a number, got {self.value!r}"
            )
        if not math.isfinite(self.value):
            raise StructureValidationError("Workout length value must be a finite number")
        if self.value < 0:
            raise StructureValidationError("Workout length value must be non-negative")
        if unit == LengthUnit.REPETITION and self.value != int(self.value):
            raise StructureValidationError("Repetition count must be an integer")

    def to_seconds(self) -> float | None:
        return convert_to_seconds(self.value, self.unit)

    def to_meters(self) -> float | None:
        return convert_to_meters(self.value, self.unit)

    def is_time_unit(self) -> bool:
        return is_time_unit(self.unit)

    def is_distance_unit(self) -> bool:
        return is_distance_unit(self.unit)

    def is_repetition_unit(self) -> bool:
        return is_repetition_unit(self.unit)

    def __str__(self) -> str:
        suffix = "" if self.value == 1 else "s"
        return f"{format_quantity(self.value)} {self.unit.value}{suffix}"


def normalize_length(length: WorkoutLength) -> WorkoutLength:
    """Express *length* in the engine's working units.

    Time lengths become seconds and distance lengths become meters, the two
    non-count units of the TrainingPeaks wire format. Repetition counts are
    returned unchanged.
    """
    seconds = length.to_seconds()
    if seconds is not None:
        return WorkoutLength(seconds, LengthUnit.SECOND)
    meters = length.to_meters()
    if meters is not None:
        return WorkoutLength(meters, LengthUnit.METER)
    return length
