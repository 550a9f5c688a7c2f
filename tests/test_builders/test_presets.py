"""Tests for preset steps, elements and structures."""

from __future__ import annotations

import pytest

from workout_structure.builders.presets import (
    CyclingWorkoutConfig,
    IntervalWorkoutConfig,
    create_cooldown_element,
    create_cooldown_step,
    create_cycling_workout_structure,
    create_interval_step,
    create_interval_workout_structure,
    create_intervals_element,
    create_recovery_step,
    create_rest_step,
    create_simple_interval_structure,
    create_sweet_spot_step,
    create_vo2max_step,
    create_warmup_element,
    create_warmup_step,
)
from workout_structure.converter import convert_to_complete_structure, generate_polyline
from workout_structure.models import (
    ElementType,
    IntensityClass,
    IntensityMetric,
    LengthUnit,
    WorkoutLength,
    WorkoutTarget,
)


@pytest.fixture
def interval_config() -> IntervalWorkoutConfig:
    return IntervalWorkoutConfig(
        interval_duration=4,
        recovery_duration=2,
        number_of_intervals=5,
        interval_intensity=(95, 105),
        recovery_intensity=(60, 70),
    )


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


class TestPresetSteps:
    def test_warmup(self):
        step = create_warmup_step()
        assert step.name == "Progressive Warmup"
        assert step.intensity_class is IntensityClass.WARM_UP
        assert step.length == WorkoutLength(600, LengthUnit.SECOND)
        assert step.primary_target == WorkoutTarget(50, 70)

    def test_interval_default_name(self):
        step = create_interval_step(4, (95, 105))
        assert step.name == "4min Interval"
        assert step.is_active()

    def test_interval_custom_name(self):
        assert create_interval_step(4, (95, 105), name="Threshold").name == "Threshold"

    def test_recovery_is_active(self):
        step = create_recovery_step(2, (60, 70))
        assert step.name == "2min Recovery"
        assert step.intensity_class is IntensityClass.ACTIVE

    def test_rest(self):
        step = create_rest_step(3)
        assert step.name == "3min Rest"
        assert step.is_rest()
        assert step.primary_target == WorkoutTarget(0, 0)

    def test_cooldown(self):
        step = create_cooldown_step()
        assert step.name == "Cooldown"
        assert step.is_cool_down()
        assert step.length.value == 300
        assert step.primary_target == WorkoutTarget(45, 55)

    def test_sweet_spot_and_vo2max(self):
        assert create_sweet_spot_step(20).primary_target == WorkoutTarget(88, 93)
        assert create_vo2max_step(3).primary_target == WorkoutTarget(120, 130)
        assert create_vo2max_step(3).name == "VO2Max Interval"


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


class TestPresetElements:
    def test_warmup_element_starts_at_zero(self):
        element = create_warmup_element(10)
        assert (element.begin, element.end) == (0, 600)
        assert element.type is ElementType.STEP

    def test_intervals_element_timing(self):
        element = create_intervals_element(5, 4, 2, (95, 105), (60, 70), start_time=600)
        assert element.type is ElementType.REPETITION
        assert element.length == WorkoutLength(5, LengthUnit.REPETITION)
        assert (element.begin, element.end) == (600, 600 + 5 * 6 * 60)

    def test_cooldown_element(self):
        element = create_cooldown_element(5, start_time=2400)
        assert (element.begin, element.end) == (2400, 2700)


# ---------------------------------------------------------------------------
# Structures
# ---------------------------------------------------------------------------


class TestIntervalWorkoutStructure:
    def test_contiguous_timing(self, interval_config):
        structure = create_interval_workout_structure(interval_config)
        offsets = [(e.begin, e.end) for e in structure.structure]
        assert offsets == [(0, 600), (600, 2400), (2400, 2700)]

    def test_metrics_and_polyline(self, interval_config):
        structure = create_interval_workout_structure(interval_config)
        assert structure.primary_intensity_metric is IntensityMetric.PERCENT_OF_THRESHOLD_PACE
        assert structure.polyline == generate_polyline(2700)

    def test_matches_converted_simple_structure(self, interval_config):
        """Explicit offsets agree with the converter's computed offsets."""
        explicit = create_interval_workout_structure(interval_config)
        converted = convert_to_complete_structure(create_simple_interval_structure(interval_config))
        assert [(e.begin, e.end) for e in explicit.structure] == [
            (e.begin, e.end) for e in converted.structure
        ]
        assert explicit.polyline == converted.polyline


class TestCyclingWorkoutStructure:
    def test_default_blocks(self):
        structure = create_cycling_workout_structure()
        names = [e.steps[0].name for e in structure.structure]
        assert names == [
            "Progressive Warmup",
            "Sweet Spot Training",
            "10min Recovery",
            "VO2Max Interval",
            "Cooldown",
        ]
        assert structure.primary_intensity_metric is IntensityMetric.PERCENT_OF_THRESHOLD_POWER

    def test_default_timing(self):
        structure = create_cycling_workout_structure()
        # 15 + 20 + 10 + 4 x (3 + 5) + 15 minutes
        assert structure.total_duration() == (15 + 20 + 10 + 32 + 15) * 60
        vo2max = structure.repetitions()[0]
        assert vo2max.steps[1].is_rest()

    def test_optional_blocks_dropped(self):
        structure = create_cycling_workout_structure(
            CyclingWorkoutConfig(sweet_spot_duration=0, recovery_duration=0, vo2max_intervals=0)
        )
        assert len(structure.structure) == 2
        assert structure.structure[1].begin == structure.structure[0].end
