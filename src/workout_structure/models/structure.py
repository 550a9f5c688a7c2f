"""Workout structure aggregates: simple (authored) and complete (timed)."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from workout_structure.errors import StructureValidationError
from workout_structure.models.element import (
    CompleteStructureElement,
    Polyline,
    SimpleStructureElement,
)
from workout_structure.models.enums import (
    ElementType,
    IntensityMetric,
    IntensityTargetType,
    LengthMetric,
)
from workout_structure.models.length import format_quantity, normalize_length
from workout_structure.models.step import WorkoutStep


def _coerce_metrics(obj, **enum_fields) -> None:
    for name, enum_cls in enum_fields.items():
        value = getattr(obj, name)
        try:
            object.__setattr__(obj, name, enum_cls(value))
        except ValueError:
            raise StructureValidationError(f"Invalid {name}: {value}") from None


@dataclass(frozen=True)
class SimpleWorkoutStructure:
    """Ordered structure elements plus structure-wide metadata, no timing.

    This is what authors build; the converter turns it into a
    :class:`WorkoutStructure`.
    """

    structure: tuple[SimpleStructureElement, ...] = field(default_factory=tuple)
    primary_length_metric: LengthMetric = LengthMetric.DURATION
    primary_intensity_metric: IntensityMetric = IntensityMetric.PERCENT_OF_THRESHOLD_PACE
    intensity_target_type: IntensityTargetType = IntensityTargetType.RANGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "structure", tuple(self.structure))
        _coerce_metrics(
            self,
            primary_length_metric=LengthMetric,
            primary_intensity_metric=IntensityMetric,
            intensity_target_type=IntensityTargetType,
        )


@dataclass(frozen=True)
class WorkoutStructure:
    """Complete workout structure with per-element timing and a polyline.

    Elements are ordered in time and never overlap. Structures produced by
    the converter are also contiguous from 0: ``structure[0].begin == 0``
    and each element ends where the next begins.
    """

    structure: tuple[CompleteStructureElement, ...]
    polyline: Polyline
    primary_length_metric: LengthMetric
    primary_intensity_metric: IntensityMetric
    primary_intensity_target_or_range: IntensityTargetType

    def __post_init__(self) -> None:
        object.__setattr__(self, "structure", tuple(self.structure))
        object.__setattr__(
            self, "polyline", tuple(tuple(point) for point in self.polyline)
        )
        _coerce_metrics(
            self,
            primary_length_metric=LengthMetric,
            primary_intensity_metric=IntensityMetric,
            primary_intensity_target_or_range=IntensityTargetType,
        )
        for current, following in zip(self.structure, self.structure[1:]):
            if current.end > following.begin:
                raise StructureValidationError(
                    "Workout structure elements cannot overlap"
                )

    # -- Timing -----------------------------------------------------------

    def total_duration(self) -> float:
        """Sum of element durations in seconds."""
        return sum(element.end - element.begin for element in self.structure)

    # -- Step queries -----------------------------------------------------

    def all_steps(self) -> list[WorkoutStep]:
        """All steps in element order, then in-element order."""
        return [step for element in self.structure for step in element.steps]

    def active_steps(self) -> list[WorkoutStep]:
        return [step for step in self.all_steps() if step.is_active()]

    def rest_steps(self) -> list[WorkoutStep]:
        return [step for step in self.all_steps() if step.is_rest()]

    # -- Element queries --------------------------------------------------

    def elements_by_type(self, element_type: ElementType) -> list[CompleteStructureElement]:
        return [element for element in self.structure if element.type == element_type]

    def repetitions(self) -> list[CompleteStructureElement]:
        return self.elements_by_type(ElementType.REPETITION)

    def step_elements(self) -> list[CompleteStructureElement]:
        return self.elements_by_type(ElementType.STEP)

    # -- Metadata ---------------------------------------------------------

    def is_time_based(self) -> bool:
        return self.primary_length_metric == LengthMetric.DURATION

    def is_distance_based(self) -> bool:
        return self.primary_length_metric == LengthMetric.DISTANCE

    def calculate_average_intensity(self) -> float:
        """Mean of each step's primary-target midpoint; 0 when there are no steps."""
        steps = self.all_steps()
        if not steps:
            return 0.0
        return sum(step.primary_target.midpoint for step in steps) / len(steps)

    def __str__(self) -> str:
        return (
            f"Workout Structure ({format_quantity(self.total_duration())}s, "
            f"{len(self.all_steps())} steps, {len(self.active_steps())} active, "
            f"{len(self.repetitions())} repetitions)"
        )


def normalize_structure(simple: SimpleWorkoutStructure) -> SimpleWorkoutStructure:
    """Express every element and step length in seconds or meters.

    Structures assembled by hand or parsed from a file may carry minutes,
    hours, kilometers or miles; the converter times lengths as given.
    """
    elements = tuple(
        dataclasses.replace(
            element,
            length=normalize_length(element.length),
            steps=tuple(
                dataclasses.replace(step, length=normalize_length(step.length))
                for step in element.steps
            ),
        )
        for element in simple.structure
    )
    return dataclasses.replace(simple, structure=elements)
