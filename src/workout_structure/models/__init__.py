"""Data models for workout structures."""

from workout_structure.models.element import (
    CompleteStructureElement,
    Polyline,
    SimpleStructureElement,
)
from workout_structure.models.enums import (
    ElementType,
    IntensityClass,
    IntensityMetric,
    IntensityTargetType,
    LengthMetric,
    LengthUnit,
)
from workout_structure.models.length import (
    WorkoutLength,
    convert_to_meters,
    convert_to_seconds,
    format_quantity,
    is_distance_unit,
    is_repetition_unit,
    is_time_unit,
    normalize_length,
)
from workout_structure.models.step import WorkoutStep
from workout_structure.models.structure import (
    SimpleWorkoutStructure,
    WorkoutStructure,
    normalize_structure,
)
from workout_structure.models.target import WorkoutTarget

__all__ = [
    "CompleteStructureElement",
    "ElementType",
    "IntensityClass",
    "IntensityMetric",
    "IntensityTargetType",
    "LengthMetric",
    "LengthUnit",
    "Polyline",
    "SimpleStructureElement",
    "SimpleWorkoutStructure",
    "WorkoutLength",
    "WorkoutStep",
    "WorkoutStructure",
    "WorkoutTarget",
    "convert_to_meters",
    "convert_to_seconds",
    "format_quantity",
    "is_distance_unit",
    "is_repetition_unit",
    "is_time_unit",
    "normalize_length",
    "normalize_structure",
]
