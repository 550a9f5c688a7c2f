"""Serialization module: export and import TrainingPeaks structure documents."""

from workout_structure.serialization.trainingpeaks import (
    simple_structure_from_dict,
    simple_structure_to_dict,
    structure_from_trainingpeaks_json,
    to_trainingpeaks_json,
    to_trainingpeaks_json_string,
)

__all__ = [
    "simple_structure_from_dict",
    "simple_structure_to_dict",
    "structure_from_trainingpeaks_json",
    "to_trainingpeaks_json",
    "to_trainingpeaks_json_string",
]
