"""Intensity target value object."""

from __future__ import annotations

import math
from dataclasses import dataclass

from workout_structure.errors import StructureValidationError
from workout_structure.models.length import format_quantity


@dataclass(frozen=True)
class WorkoutTarget:
    """Intensity target as a min/max pair on the structure's intensity scale.

    Equal bounds describe a single-point target (e.g. 80% FTP), unequal
    bounds a range (e.g. 85-95% threshold pace).
    """

    min_value: float
    max_value: float

    def __post_init__(self) -> None:
        for name in ("min_value", "max_value"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise StructureValidationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise StructureValidationError(
                    f"{name} must be a finite, non-negative number"
                )
        if self.min_value > self.max_value:
            raise StructureValidationError("minValue cannot be greater than maxValue")

    def is_single_target(self) -> bool:
        return self.min_value == self.max_value

    def is_range_target(self) -> bool:
        return self.min_value < self.max_value

    @property
    def midpoint(self) -> float:
        return (self.min_value + self.max_value) / 2

    @property
    def range_width(self) -> float:
        return self.max_value - self.min_value

    def is_value_in_range(self, value: float) -> bool:
        """Return True if *value* lies within the target, bounds included."""
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return f"{format_quantity(self.min_value)}-{format_quantity(self.max_value)}"
