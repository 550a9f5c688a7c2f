"""Structure elements: the top-level blocks of a workout structure.

A *simple* element carries only what the author specifies (type, length,
steps). A *complete* element adds the absolute ``begin``/``end`` offsets in
seconds from the start of the workout plus a visualization polyline; it is
produced by the converter, or built explicitly with a time range.
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_structure.errors import StructureValidationError
from workout_structure.models.enums import ElementType
from workout_structure.models.length import WorkoutLength
from workout_structure.models.step import WorkoutStep

Polyline = tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class SimpleStructureElement:
    """A step or repetition block without computed timing.

    For ``STEP`` elements ``length`` is the block's declared duration. For
    ``REPETITION`` elements ``length`` is the repeat count (unit
    ``repetition``) and the block duration derives from its steps.
    """

    type: ElementType
    length: WorkoutLength
    steps: tuple[WorkoutStep, ...]

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "type", ElementType(self.type))
        except ValueError:
            raise StructureValidationError(
                f"Invalid structure element type: {self.type}"
            ) from None
        object.__setattr__(self, "steps", tuple(self.steps))

        if self.type == ElementType.REPETITION and not self.length.is_repetition_unit():
            raise StructureValidationError(
                "Repetition element length must use the 'repetition' unit, "
                f"got '{self.length.unit.value}'"
            )

    def is_repetition(self) -> bool:
        return self.type == ElementType.REPETITION

    def is_step(self) -> bool:
        return self.type == ElementType.STEP


@dataclass(frozen=True)
class CompleteStructureElement(SimpleStructureElement):
    """A structure element with absolute timing and its own polyline."""

    begin: float
    end: float
    polyline: Polyline = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(
            self, "polyline", tuple(tuple(point) for point in self.polyline)
        )
        if self.begin < 0:
            raise StructureValidationError("Element begin must be non-negative")
        if self.end < self.begin:
            raise StructureValidationError(
                f"Element end ({self.end}) must not be before begin ({self.begin})"
            )

    @property
    def duration(self) -> float:
        return self.end - self.begin
