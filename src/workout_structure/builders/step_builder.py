"""Fluent builder for :class:`WorkoutStep`."""

from __future__ import annotations

from workout_structure.errors import StructureBuildError
from workout_structure.models.enums import IntensityClass, LengthUnit
from workout_structure.models.length import WorkoutLength, normalize_length
from workout_structure.models.step import WorkoutStep
from workout_structure.models.target import WorkoutTarget


class WorkoutStepBuilder:
    """Accumulates step fields and validates them at :meth:`build`.

    Usage::

        step = (
            WorkoutStepBuilder()
            .name("Threshold")
            .duration(8)
            .intensity(IntensityClass.ACTIVE)
            .target(95, 100)
            .build()
        )

    Lengths are normalized at build time (minutes/hours to seconds,
    kilometers/miles to meters). Builders are single-use.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._length: WorkoutLength | None = None
        self._intensity_class: IntensityClass | None = None
        self._targets: list[WorkoutTarget] | None = None
        self._open_duration = False

    def name(self, name: str) -> WorkoutStepBuilder:
        self._name = name
        return self

    def length(self, value: float, unit: LengthUnit) -> WorkoutStepBuilder:
        self._length = WorkoutLength(value, unit)
        return self

    def duration(self, minutes: float) -> WorkoutStepBuilder:
        return self.length(minutes, LengthUnit.MINUTE)

    def seconds(self, seconds: float) -> WorkoutStepBuilder:
        return self.length(seconds, LengthUnit.SECOND)

    def distance(self, meters: float) -> WorkoutStepBuilder:
        return self.length(meters, LengthUnit.METER)

    def kilometers(self, km: float) -> WorkoutStepBuilder:
        return self.length(km, LengthUnit.KILOMETER)

    def miles(self, miles: float) -> WorkoutStepBuilder:
        return self.length(miles, LengthUnit.MILE)

    def intensity(self, intensity_class: IntensityClass) -> WorkoutStepBuilder:
        self._intensity_class = IntensityClass(intensity_class)
        return self

    def target(self, min_value: float, max_value: float) -> WorkoutStepBuilder:
        """Replace any targets with a single min/max target."""
        self._targets = [WorkoutTarget(min_value, max_value)]
        return self

    def add_target(self, min_value: float, max_value: float) -> WorkoutStepBuilder:
        """Append a secondary target."""
        if self._targets is None:
            self._targets = []
        self._targets.append(WorkoutTarget(min_value, max_value))
        return self

    def targets(self, targets: list[WorkoutTarget]) -> WorkoutStepBuilder:
        self._targets = list(targets)
        return self

    def open_duration(self, open_duration: bool = True) -> WorkoutStepBuilder:
        self._open_duration = open_duration
        return self

    def build(self) -> WorkoutStep:
        """Return the immutable step.

        Raises:
            StructureBuildError: if name, length, intensity class or targets
                were never set.
        """
        required = {
            "name": self._name,
            "length": self._length,
            "intensityClass": self._intensity_class,
            "targets": self._targets,
        }
        missing = [field for field, value in required.items() if value is None]
        if missing:
            raise StructureBuildError.missing("WorkoutStep", missing)

        return WorkoutStep(
            name=self._name,
            length=normalize_length(self._length),
            targets=tuple(self._targets),
            intensity_class=self._intensity_class,
            open_duration=self._open_duration,
        )
