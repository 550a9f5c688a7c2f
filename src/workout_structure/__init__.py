"""Structured workout definitions for TrainingPeaks.

Author a :class:`SimpleWorkoutStructure` with the builders, convert it with
:func:`convert_to_complete_structure`, then serialize the result with
:func:`to_trainingpeaks_json`.
"""

from workout_structure.converter import convert_to_complete_structure
from workout_structure.errors import (
    StructureBuildError,
    StructureComputationError,
    StructureValidationError,
    WorkoutStructureError,
)
from workout_structure.models import (
    SimpleWorkoutStructure,
    WorkoutStructure,
    normalize_structure,
)
from workout_structure.serialization import to_trainingpeaks_json

__all__ = [
    "SimpleWorkoutStructure",
    "StructureBuildError",
    "StructureComputationError",
    "StructureValidationError",
    "WorkoutStructure",
    "WorkoutStructureError",
    "convert_to_complete_structure",
    "normalize_structure",
    "to_trainingpeaks_json",
]
