"""Fluent builders for simple and complete workout structures."""

from __future__ import annotations

from workout_structure.errors import StructureBuildError, StructureValidationError
from workout_structure.models.element import (
    CompleteStructureElement,
    Polyline,
    SimpleStructureElement,
)
from workout_structure.models.enums import (
    IntensityMetric,
    IntensityTargetType,
    LengthMetric,
)
from workout_structure.models.structure import SimpleWorkoutStructure, WorkoutStructure


class _StructureBuilderBase:
    def __init__(self) -> None:
        self._elements: list = []
        self._length_metric = LengthMetric.DURATION
        self._intensity_metric = IntensityMetric.PERCENT_OF_THRESHOLD_PACE
        self._target_type = IntensityTargetType.RANGE

    def add_elements(self, elements: list):
        for element in elements:
            self.add_element(element)
        return self

    def primary_length_metric(self, metric: LengthMetric):
        self._length_metric = LengthMetric(metric)
        return self

    def primary_intensity_metric(self, metric: IntensityMetric):
        self._intensity_metric = IntensityMetric(metric)
        return self

    def intensity_target_type(self, target_type: IntensityTargetType):
        self._target_type = IntensityTargetType(target_type)
        return self

    def _check_not_empty(self, kind: str) -> None:
        if not self._elements:
            raise StructureBuildError(
                f"{kind} must have at least one element.",
                missing_fields=("structure",),
            )


class SimpleWorkoutStructureBuilder(_StructureBuilderBase):
    """Builds a :class:`SimpleWorkoutStructure` for the converter.

    Defaults: duration-based, % of threshold pace, range targets.
    """

    def add_element(self, element: SimpleStructureElement) -> SimpleWorkoutStructureBuilder:
        self._elements.append(element)
        return self

    def build(self) -> SimpleWorkoutStructure:
        self._check_not_empty("SimpleWorkoutStructure")
        return SimpleWorkoutStructure(
            structure=tuple(self._elements),
            primary_length_metric=self._length_metric,
            primary_intensity_metric=self._intensity_metric,
            intensity_target_type=self._target_type,
        )


class WorkoutStructureBuilder(_StructureBuilderBase):
    """Builds a complete :class:`WorkoutStructure` from timed elements."""

    def __init__(self) -> None:
        super().__init__()
        self._polyline: Polyline = ()

    def add_element(self, element: CompleteStructureElement) -> WorkoutStructureBuilder:
        self._elements.append(element)
        return self

    def polyline(self, points: Polyline) -> WorkoutStructureBuilder:
        self._polyline = tuple(points)
        return self

    def build(self) -> WorkoutStructure:
        """Return the structure.

        Raises:
            StructureBuildError: if no elements were added or elements overlap.
        """
        self._check_not_empty("WorkoutStructure")
        try:
            return WorkoutStructure(
                structure=tuple(self._elements),
                polyline=self._polyline,
                primary_length_metric=self._length_metric,
                primary_intensity_metric=self._intensity_metric,
                primary_intensity_target_or_range=self._target_type,
            )
        except StructureValidationError as exc:
            raise StructureBuildError(f"Invalid WorkoutStructure: {exc}") from exc
