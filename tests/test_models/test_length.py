"""Tests for WorkoutLength and the unit conversion helpers."""

from __future__ import annotations

import math

import pytest

from workout_structure.errors import StructureValidationError
from workout_structure.models.enums import LengthUnit
from workout_structure.models.length import (
    WorkoutLength,
    convert_to_meters,
    convert_to_seconds,
    is_distance_unit,
    is_repetition_unit,
    is_time_unit,
    normalize_length,
)


class TestConvertToSeconds:
    @pytest.mark.parametrize(
        "value,unit,expected",
        [
            (45, LengthUnit.SECOND, 45),
            (10, LengthUnit.MINUTE, 600),
            (1.5, LengthUnit.HOUR, 5400),
        ],
    )
    def test_time_units(self, value, unit, expected):
        assert convert_to_seconds(value, unit) == expected

    @pytest.mark.parametrize(
        "unit", [LengthUnit.METER, LengthUnit.KILOMETER, LengthUnit.MILE, LengthUnit.REPETITION]
    )
    def test_non_time_units_return_none(self, unit):
        assert convert_to_seconds(5, unit) is None


class TestConvertToMeters:
    def test_meter_passthrough(self):
        assert convert_to_meters(400, LengthUnit.METER) == 400

    def test_kilometer(self):
        assert convert_to_meters(5, LengthUnit.KILOMETER) == 5000

    def test_mile(self):
        assert convert_to_meters(1, LengthUnit.MILE) == pytest.approx(1609.344)

    def test_time_unit_returns_none(self):
        assert convert_to_meters(5, LengthUnit.MINUTE) is None


class TestUnitClassification:
    def test_time(self):
        assert is_time_unit(LengthUnit.HOUR)
        assert not is_time_unit(LengthUnit.METER)

    def test_distance(self):
        assert is_distance_unit(LengthUnit.MILE)
        assert not is_distance_unit(LengthUnit.REPETITION)

    def test_repetition(self):
        assert is_repetition_unit(LengthUnit.REPETITION)
        assert not is_repetition_unit(LengthUnit.SECOND)


class TestWorkoutLength:
    def test_unit_string_is_coerced(self):
        length = WorkoutLength(10, "minute")
        assert length.unit is LengthUnit.MINUTE

    def test_equality_requires_same_unit(self):
        assert WorkoutLength(10, LengthUnit.MINUTE) == WorkoutLength(10, LengthUnit.MINUTE)
        assert WorkoutLength(600, LengthUnit.SECOND) != WorkoutLength(10, LengthUnit.MINUTE)

    def test_zero_is_valid(self):
        assert WorkoutLength(0, LengthUnit.SECOND).value == 0

    @pytest.mark.parametrize("value", [-1, math.inf, math.nan, "10", True])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(StructureValidationError):
            WorkoutLength(value, LengthUnit.SECOND)

    def test_rejects_unknown_unit(self):
        with pytest.raises(StructureValidationError, match="Invalid workout length unit"):
            WorkoutLength(10, "fortnight")

    def test_repetition_must_be_whole(self):
        with pytest.raises(StructureValidationError, match="integer"):
            WorkoutLength(2.5, LengthUnit.REPETITION)

    def test_conversion_methods(self):
        assert WorkoutLength(2, LengthUnit.MINUTE).to_seconds() == 120
        assert WorkoutLength(2, LengthUnit.MINUTE).to_meters() is None
        assert WorkoutLength(3, LengthUnit.KILOMETER).to_meters() == 3000

    def test_str(self):
        assert str(WorkoutLength(10, LengthUnit.MINUTE)) == "10 minutes"
        assert str(WorkoutLength(1, LengthUnit.REPETITION)) == "1 repetition"
        assert str(WorkoutLength(2.5, LengthUnit.KILOMETER)) == "2.5 kilometers"

    def test_is_frozen(self):
        length = WorkoutLength(10, LengthUnit.SECOND)
        with pytest.raises(AttributeError):
            length.value = 20


class TestNormalizeLength:
    def test_minutes_to_seconds(self):
        assert normalize_length(WorkoutLength(10, LengthUnit.MINUTE)) == WorkoutLength(
            600, LengthUnit.SECOND
        )

    def test_kilometers_to_meters(self):
        assert normalize_length(WorkoutLength(5, LengthUnit.KILOMETER)) == WorkoutLength(
            5000, LengthUnit.METER
        )

    def test_repetition_unchanged(self):
        length = WorkoutLength(4, LengthUnit.REPETITION)
        assert normalize_length(length) is length
