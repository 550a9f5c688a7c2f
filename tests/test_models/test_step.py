"""Tests for WorkoutStep."""

from __future__ import annotations

import pytest

from workout_structure.errors import StructureValidationError
from workout_structure.models import (
    IntensityClass,
    LengthUnit,
    WorkoutLength,
    WorkoutStep,
    WorkoutTarget,
)


def _step(**overrides) -> WorkoutStep:
    defaults = {
        "name": "Threshold",
        "length": WorkoutLength(480, LengthUnit.SECOND),
        "targets": (WorkoutTarget(95, 100),),
        "intensity_class": IntensityClass.ACTIVE,
    }
    defaults.update(overrides)
    return WorkoutStep(**defaults)


class TestValidation:
    def test_defaults(self):
        step = _step()
        assert step.open_duration is False
        assert step.intensity_class is IntensityClass.ACTIVE

    def test_empty_name_rejected(self):
        with pytest.raises(StructureValidationError, match="1-100 characters"):
            _step(name="")

    def test_long_name_rejected(self):
        with pytest.raises(StructureValidationError):
            _step(name="x" * 101)

    def test_name_at_limit_accepted(self):
        assert len(_step(name="x" * 100).name) == 100

    def test_repetition_length_rejected(self):
        with pytest.raises(StructureValidationError, match="not repetitions"):
            _step(length=WorkoutLength(3, LengthUnit.REPETITION))

    def test_no_targets_rejected(self):
        with pytest.raises(StructureValidationError, match="at least one target"):
            _step(targets=())

    def test_targets_list_becomes_tuple(self):
        step = _step(targets=[WorkoutTarget(1, 2)])
        assert step.targets == (WorkoutTarget(1, 2),)

    def test_intensity_string_coerced(self):
        assert _step(intensity_class="warmUp").intensity_class is IntensityClass.WARM_UP

    def test_unknown_intensity_rejected(self):
        with pytest.raises(StructureValidationError, match="Invalid intensity class"):
            _step(intensity_class="sprint")


class TestQueries:
    @pytest.mark.parametrize(
        "intensity_class,method",
        [
            (IntensityClass.ACTIVE, "is_active"),
            (IntensityClass.REST, "is_rest"),
            (IntensityClass.WARM_UP, "is_warm_up"),
            (IntensityClass.COOL_DOWN, "is_cool_down"),
        ],
    )
    def test_intensity_predicates(self, intensity_class, method):
        assert getattr(_step(intensity_class=intensity_class), method)()

    def test_primary_target_is_first(self):
        step = _step(targets=(WorkoutTarget(60, 70), WorkoutTarget(140, 150)))
        assert step.primary_target == WorkoutTarget(60, 70)

    def test_duration_and_distance(self):
        assert _step(length=WorkoutLength(5, LengthUnit.MINUTE)).duration_seconds() == 300
        distance_step = _step(length=WorkoutLength(2, LengthUnit.KILOMETER))
        assert distance_step.distance_meters() == 2000
        assert distance_step.duration_seconds() is None

    def test_str(self):
        assert str(_step()) == "Threshold (active) - 480s @ 95-100"

    def test_str_single_point_targets_print_as_range(self):
        step = _step(
            length=WorkoutLength(1, LengthUnit.KILOMETER),
            targets=(WorkoutTarget(80, 80), WorkoutTarget(100, 120)),
        )
        assert str(step) == "Threshold (active) - 1000m @ 80-80, 100-120"
