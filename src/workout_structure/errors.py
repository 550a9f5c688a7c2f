"""Exception hierarchy for workout structure construction and conversion."""

from __future__ import annotations


class WorkoutStructureError(Exception):
    """Base exception for all workout_structure errors."""


class StructureValidationError(WorkoutStructureError, ValueError):
    """A value object was given invalid data (negative length, bad unit, etc.)."""


class StructureBuildError(WorkoutStructureError):
    """A builder could not produce a value (missing or inconsistent fields)."""

    def __init__(self, message: str, missing_fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing_fields = tuple(missing_fields)

    @classmethod
    def missing(cls, kind: str, missing_fields: list[str]) -> StructureBuildError:
        """Build the error raised when *kind* lacks *missing_fields*."""
        return cls(
            f"Incomplete {kind}. Missing required properties: "
            f"{', '.join(missing_fields)}",
            missing_fields=tuple(missing_fields),
        )


class StructureComputationError(WorkoutStructureError):
    """The converter could not compute timing for a structure element."""

    def __init__(
        self,
        message: str,
        element_type: str | None = None,
        step_count: int | None = None,
        element_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.element_type = element_type
        self.step_count = step_count
        self.element_index = element_index
