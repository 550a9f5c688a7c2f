"""Preset steps, elements and structures for common workout shapes.

Durations passed to these helpers are in minutes; the builders normalize
them to seconds. Element ``begin``/``end`` offsets are in seconds from the
start of the workout.

Usage::

    structure = create_interval_workout_structure(
        IntervalWorkoutConfig(
            interval_duration=4,
            recovery_duration=2,
            number_of_intervals=5,
            interval_intensity=(95, 105),
            recovery_intensity=(60, 70),
        )
    )
"""

from __future__ import annotations

from dataclasses import dataclass

from workout_structure.builders.element_builder import (
    SimpleStructureElementBuilder,
    StructureElementBuilder,
)
from workout_structure.builders.step_builder import WorkoutStepBuilder
from workout_structure.builders.structure_builder import (
    SimpleWorkoutStructureBuilder,
    WorkoutStructureBuilder,
)
from workout_structure.converter import generate_polyline
from workout_structure.models.element import CompleteStructureElement
from workout_structure.models.enums import (
    SECONDS_PER_MINUTE,
    ElementType,
    IntensityClass,
    IntensityMetric,
    IntensityTargetType,
    LengthMetric,
    LengthUnit,
)
from workout_structure.models.step import WorkoutStep
from workout_structure.models.structure import SimpleWorkoutStructure, WorkoutStructure

IntensityRange = tuple[float, float]

# ---------------------------------------------------------------------------
# Preset target ranges (percent of threshold)
# ---------------------------------------------------------------------------
WARMUP_RANGE: IntensityRange = (50, 70)
COOLDOWN_RANGE: IntensityRange = (45, 55)
SWEET_SPOT_RANGE: IntensityRange = (88, 93)
VO2MAX_RANGE: IntensityRange = (120, 130)
ENDURANCE_RECOVERY_RANGE: IntensityRange = (55, 65)
REST_RANGE: IntensityRange = (0, 0)


@dataclass(frozen=True)
class IntervalWorkoutConfig:
    """Shape of a warmup / N x (work + recovery) / cooldown session.

    Attributes:
        interval_duration: Work interval duration in minutes.
        recovery_duration: Recovery duration in minutes.
        number_of_intervals: Repeat count of the work/recovery pair.
        interval_intensity: (min, max) target of the work interval.
        recovery_intensity: (min, max) target of the recovery.
        warmup_duration: Warmup duration in minutes.
        cooldown_duration: Cooldown duration in minutes.
        primary_intensity_metric: Scale the targets are expressed in.
    """

    interval_duration: float
    recovery_duration: float
    number_of_intervals: int
    interval_intensity: IntensityRange
    recovery_intensity: IntensityRange
    warmup_duration: float = 10
    cooldown_duration: float = 5
    primary_intensity_metric: IntensityMetric = IntensityMetric.PERCENT_OF_THRESHOLD_PACE


@dataclass(frozen=True)
class CyclingWorkoutConfig:
    """Shape of a power-based cycling session.

    A zero ``sweet_spot_duration``, ``recovery_duration`` or
    ``vo2max_intervals`` drops that block. All durations are minutes.
    """

    warmup_duration: float = 15
    sweet_spot_duration: float = 20
    recovery_duration: float = 10
    vo2max_intervals: int = 4
    vo2max_duration: float = 3
    vo2max_recovery_duration: float = 5
    cooldown_duration: float = 15


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def _step(
    name: str,
    duration: float,
    intensity_class: IntensityClass,
    target: IntensityRange,
) -> WorkoutStep:
    return (
        WorkoutStepBuilder()
        .name(name)
        .duration(duration)
        .intensity(intensity_class)
        .target(*target)
        .build()
    )


def create_warmup_step(duration: float = 10) -> WorkoutStep:
    return _step("Progressive Warmup", duration, IntensityClass.WARM_UP, WARMUP_RANGE)


def create_interval_step(
    duration: float,
    intensity: IntensityRange,
    name: str | None = None,
) -> WorkoutStep:
    return _step(name or f"{duration}min Interval", duration, IntensityClass.ACTIVE, intensity)


def create_recovery_step(
    duration: float,
    intensity: IntensityRange,
    name: str | None = None,
) -> WorkoutStep:
    # Recovery is classed active, not rest.
    return _step(name or f"{duration}min Recovery", duration, IntensityClass.ACTIVE, intensity)


def create_rest_step(duration: float, name: str | None = None) -> WorkoutStep:
    return _step(name or f"{duration}min Rest", duration, IntensityClass.REST, REST_RANGE)


def create_cooldown_step(duration: float = 5) -> WorkoutStep:
    return _step("Cooldown", duration, IntensityClass.COOL_DOWN, COOLDOWN_RANGE)


def create_sweet_spot_step(duration: float) -> WorkoutStep:
    return _step("Sweet Spot Training", duration, IntensityClass.ACTIVE, SWEET_SPOT_RANGE)


def create_vo2max_step(duration: float) -> WorkoutStep:
    return _step("VO2Max Interval", duration, IntensityClass.ACTIVE, VO2MAX_RANGE)


# ---------------------------------------------------------------------------
# Complete elements
# ---------------------------------------------------------------------------

def _step_element(
    step: WorkoutStep,
    duration: float,
    start_time: float,
) -> CompleteStructureElement:
    return (
        StructureElementBuilder()
        .type(ElementType.STEP)
        .length(duration, LengthUnit.MINUTE)
        .steps([step])
        .time_range(start_time, start_time + duration * SECONDS_PER_MINUTE)
        .build()
    )


def _repetition_element(
    count: int,
    steps: list[WorkoutStep],
    start_time: float,
) -> CompleteStructureElement:
    block_seconds = sum(step.length.value for step in steps) * count
    return (
        StructureElementBuilder()
        .type(ElementType.REPETITION)
        .repetitions(count)
        .steps(steps)
        .time_range(start_time, start_time + block_seconds)
        .build()
    )


def create_warmup_element(duration: float = 10) -> CompleteStructureElement:
    """Warmup block starting at 0."""
    return _step_element(create_warmup_step(duration), duration, 0)


def create_intervals_element(
    number_of_intervals: int,
    interval_duration: float,
    recovery_duration: float,
    interval_intensity: IntensityRange,
    recovery_intensity: IntensityRange,
    start_time: float = 0,
) -> CompleteStructureElement:
    """Repetition block of work/recovery pairs starting at *start_time* seconds."""
    steps = [
        create_interval_step(interval_duration, interval_intensity),
        create_recovery_step(recovery_duration, recovery_intensity),
    ]
    return _repetition_element(number_of_intervals, steps, start_time)


def create_cooldown_element(
    duration: float = 5,
    start_time: float = 0,
) -> CompleteStructureElement:
    return _step_element(create_cooldown_step(duration), duration, start_time)


# ---------------------------------------------------------------------------
# Structures
# ---------------------------------------------------------------------------

def _finish(
    elements: list[CompleteStructureElement],
    intensity_metric: IntensityMetric,
) -> WorkoutStructure:
    total_seconds = elements[-1].end if elements else 0
    return (
        WorkoutStructureBuilder()
        .add_elements(elements)
        .polyline(generate_polyline(total_seconds))
        .primary_length_metric(LengthMetric.DURATION)
        .primary_intensity_metric(intensity_metric)
        .intensity_target_type(IntensityTargetType.RANGE)
        .build()
    )


def create_interval_workout_structure(config: IntervalWorkoutConfig) -> WorkoutStructure:
    """Warmup, one repetition block of intervals, cooldown."""
    warmup = create_warmup_element(config.warmup_duration)
    intervals = create_intervals_element(
        config.number_of_intervals,
        config.interval_duration,
        config.recovery_duration,
        config.interval_intensity,
        config.recovery_intensity,
        start_time=warmup.end,
    )
    cooldown = create_cooldown_element(config.cooldown_duration, start_time=intervals.end)
    return _finish([warmup, intervals, cooldown], config.primary_intensity_metric)


def create_cycling_workout_structure(
    config: CyclingWorkoutConfig | None = None,
) -> WorkoutStructure:
    """Warmup, sweet spot, endurance recovery, VO2max repeats, cooldown.

    Targets are percent of threshold power.
    """
    config = config or CyclingWorkoutConfig()
    elements = [create_warmup_element(config.warmup_duration)]

    if config.sweet_spot_duration > 0:
        elements.append(
            _step_element(
                create_sweet_spot_step(config.sweet_spot_duration),
                config.sweet_spot_duration,
                elements[-1].end,
            )
        )

    if config.recovery_duration > 0:
        elements.append(
            _step_element(
                create_recovery_step(config.recovery_duration, ENDURANCE_RECOVERY_RANGE),
                config.recovery_duration,
                elements[-1].end,
            )
        )

    if config.vo2max_intervals > 0:
        steps = [
            create_vo2max_step(config.vo2max_duration),
            create_rest_step(config.vo2max_recovery_duration),
        ]
        elements.append(
            _repetition_element(config.vo2max_intervals, steps, elements[-1].end)
        )

    elements.append(
        create_cooldown_element(config.cooldown_duration, start_time=elements[-1].end)
    )
    return _finish(elements, IntensityMetric.PERCENT_OF_THRESHOLD_POWER)


def create_simple_interval_structure(config: IntervalWorkoutConfig) -> SimpleWorkoutStructure:
    """Untimed equivalent of :func:`create_interval_workout_structure`.

    Feed the result to ``convert_to_complete_structure`` to obtain offsets.
    """
    warmup = (
        SimpleStructureElementBuilder()
        .type(ElementType.STEP)
        .length(config.warmup_duration, LengthUnit.MINUTE)
        .add_step(create_warmup_step(config.warmup_duration))
        .build()
    )
    intervals = (
        SimpleStructureElementBuilder()
        .type(ElementType.REPETITION)
        .repetitions(config.number_of_intervals)
        .steps([
            create_interval_step(config.interval_duration, config.interval_intensity),
            create_recovery_step(config.recovery_duration, config.recovery_intensity),
        ])
        .build()
    )
    cooldown = (
        SimpleStructureElementBuilder()
        .type(ElementType.STEP)
        .length(config.cooldown_duration, LengthUnit.MINUTE)
        .add_step(create_cooldown_step(config.cooldown_duration))
        .build()
    )
    return (
        SimpleWorkoutStructureBuilder()
        .add_elements([warmup, intervals, cooldown])
        .primary_intensity_metric(config.primary_intensity_metric)
        .build()
    )
