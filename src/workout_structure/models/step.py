"""Workout step: the leaf activity of a structured workout."""

from __future__ import annotations

from dataclasses import dataclass

from workout_structure.errors import StructureValidationError
from workout_structure.models.enums import MAX_STEP_NAME_LENGTH, IntensityClass
from workout_structure.models.length import WorkoutLength, format_quantity
from workout_structure.models.target import WorkoutTarget


@dataclass(frozen=True)
class WorkoutStep:
    """A single named step with a length and one or more intensity targets.

    The length must be time- or distance-based; repeat counts belong to
    repetition elements, never to steps. ``targets[0]`` is the primary
    target used for intensity summaries.
    """

    name: str
    length: WorkoutLength
    targets: tuple[WorkoutTarget, ...]
    intensity_class: IntensityClass
    open_duration: bool = False     # Step ends on lap press, not on length

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", tuple(self.targets))
        try:
            object.__setattr__(
                self, "intensity_class", IntensityClass(self.intensity_class)
            )
        except ValueError:
            raise StructureValidationError(
                f"Invalid intensity class: {self.intensity_class}"
            ) from None

        if not self.name or len(self.name) > MAX_STEP_NAME_LENGTH:
            raise StructureValidationError(
                f"Step name must be 1-{MAX_STEP_NAME_LENGTH} characters"
            )
        if self.length.is_repetition_unit():
            raise StructureValidationError(
                f"Step '{self.name}' must have a time or distance length, not repetitions"
            )
        if not self.targets:
            raise StructureValidationError(
                f"Step '{self.name}' must have at least one target"
            )

    def is_active(self) -> bool:
        return self.intensity_class == IntensityClass.ACTIVE

    def is_rest(self) -> bool:
        return self.intensity_class == IntensityClass.REST

    def is_warm_up(self) -> bool:
        return self.intensity_class == IntensityClass.WARM_UP

    def is_cool_down(self) -> bool:
        return self.intensity_class == IntensityClass.COOL_DOWN

    @property
    def primary_target(self) -> WorkoutTarget:
        return self.targets[0]

    def duration_seconds(self) -> float | None:
        return self.length.to_seconds()

    def distance_meters(self) -> float | None:
        return self.length.to_meters()

    def __str__(self) -> str:
        description = f"{self.name} ({self.intensity_class.value})"
        seconds = self.duration_seconds()
        meters = self.distance_meters()
        if seconds is not None:
            description += f" - {format_quantity(seconds)}s"
        elif meters is not None:
            description += f" - {format_quantity(meters)}m"
        targets = ", ".join(str(t) for t in self.targets)
        return f"{description} @ {targets}"
