"""Fluent builders and presets for workout structures."""

from workout_structure.builders.element_builder import (
    SimpleStructureElementBuilder,
    StructureElementBuilder,
)
from workout_structure.builders.step_builder import WorkoutStepBuilder
from workout_structure.builders.structure_builder import (
    SimpleWorkoutStructureBuilder,
    WorkoutStructureBuilder,
)

__all__ = [
    "SimpleStructureElementBuilder",
    "SimpleWorkoutStructureBuilder",
    "StructureElementBuilder",
    "WorkoutStepBuilder",
    "WorkoutStructureBuilder",
]
