"""Fluent builders for structure elements.

:class:`SimpleStructureElementBuilder` produces elements without timing,
ready for the converter. :class:`StructureElementBuilder` produces complete
elements and additionally requires an explicit ``time_range``.
"""

from __future__ import annotations

from workout_structure.errors import StructureBuildError, StructureValidationError
from workout_structure.models.element import (
    CompleteStructureElement,
    Polyline,
    SimpleStructureElement,
)
from workout_structure.models.enums import ElementType, LengthUnit
from workout_structure.models.length import WorkoutLength, normalize_length
from workout_structure.models.step import WorkoutStep


class SimpleStructureElementBuilder:
    """Builds a :class:`SimpleStructureElement` (no begin/end)."""

    _kind = "SimpleStructureElement"

    def __init__(self) -> None:
        self._type: ElementType | None = None
        self._length: WorkoutLength | None = None
        self._steps: list[WorkoutStep] | None = None

    def type(self, element_type: ElementType) -> SimpleStructureElementBuilder:
        self._type = ElementType(element_type)
        return self

    def length(self, value: float, unit: LengthUnit) -> SimpleStructureElementBuilder:
        self._length = WorkoutLength(value, unit)
        return self

    def repetitions(self, count: int) -> SimpleStructureElementBuilder:
        return self.length(count, LengthUnit.REPETITION)

    def steps(self, steps: list[WorkoutStep]) -> SimpleStructureElementBuilder:
        self._steps = list(steps)
        return self

    def add_step(self, step: WorkoutStep) -> SimpleStructureElementBuilder:
        if self._steps is None:
            self._steps = []
        self._steps.append(step)
        return self

    def _required(self) -> dict:
        return {"type": self._type, "length": self._length, "steps": self._steps}

    def _check(self) -> None:
        missing = [name for name, value in self._required().items() if value is None]
        if missing:
            raise StructureBuildError.missing(self._kind, missing)
        if self._type == ElementType.REPETITION and not self._length.is_repetition_unit():
            raise StructureBuildError(
                f"Incomplete {self._kind}. A repetition element needs a "
                f"'repetition' length, got '{self._length.unit.value}'"
            )

    def build(self) -> SimpleStructureElement:
        """Return the immutable element; lengths are normalized to seconds/meters.

        Raises:
            StructureBuildError: if type, length or steps is missing, or a
                repetition element has a non-repetition length.
        """
        self._check()
        return SimpleStructureElement(
            type=self._type,
            length=normalize_length(self._length),
            steps=tuple(self._steps),
        )


class StructureElementBuilder(SimpleStructureElementBuilder):
    """Builds a :class:`CompleteStructureElement` with explicit timing."""

    _kind = "WorkoutStructureElement"

    def __init__(self) -> None:
        super().__init__()
        self._begin: float | None = None
        self._end: float | None = None
        self._polyline: Polyline = ()

    def time_range(self, begin_seconds: float, end_seconds: float) -> StructureElementBuilder:
        self._begin = begin_seconds
        self._end = end_seconds
        return self

    def polyline(self, points: Polyline) -> StructureElementBuilder:
        self._polyline = tuple(points)
        return self

    def _required(self) -> dict:
        required = super()._required()
        required.update(begin=self._begin, end=self._end)
        return required

    def build(self) -> CompleteStructureElement:
        """Return the immutable complete element.

        Raises:
            StructureBuildError: if type, length, steps, begin or end is
                missing (``0`` is a valid begin), or the time range is invalid.
        """
        self._check()
        try:
            return CompleteStructureElement(
                type=self._type,
                length=normalize_length(self._length),
                steps=tuple(self._steps),
                begin=self._begin,
                end=self._end,
                polyline=self._polyline,
            )
        except StructureValidationError as exc:
            raise StructureBuildError(f"Invalid {self._kind}: {exc}") from exc
