"""Shared test fixtures: steps, simple structures and converted structures."""

from __future__ import annotations

from typing import Callable

import pytest

from workout_structure.models import (
    ElementType,
    IntensityClass,
    LengthUnit,
    SimpleStructureElement,
    SimpleWorkoutStructure,
    WorkoutLength,
    WorkoutStep,
    WorkoutTarget,
)


@pytest.fixture
def make_step() -> Callable[..., WorkoutStep]:
    """Factory for steps with a second-unit length and a single target."""

    def _make(
        seconds: float,
        intensity_class: IntensityClass = IntensityClass.ACTIVE,
        name: str = "Step",
        target: tuple[float, float] = (80, 90),
    ) -> WorkoutStep:
        return WorkoutStep(
            name=name,
            length=WorkoutLength(seconds, LengthUnit.SECOND),
            targets=(WorkoutTarget(*target),),
            intensity_class=intensity_class,
        )

    return _make


@pytest.fixture
def make_step_element(make_step) -> Callable[..., SimpleStructureElement]:
    """Factory for a single-step STEP element of *seconds*."""

    def _make(
        seconds: float,
        intensity_class: IntensityClass = IntensityClass.ACTIVE,
        unit: LengthUnit = LengthUnit.SECOND,
    ) -> SimpleStructureElement:
        return SimpleStructureElement(
            type=ElementType.STEP,
            length=WorkoutLength(seconds, unit),
            steps=(make_step(seconds, intensity_class),),
        )

    return _make


@pytest.fixture
def make_repetition() -> Callable[..., SimpleStructureElement]:
    def _make(count: int, steps) -> SimpleStructureElement:
        return SimpleStructureElement(
            type=ElementType.REPETITION,
            length=WorkoutLength(count, LengthUnit.REPETITION),
            steps=tuple(steps),
        )

    return _make


@pytest.fixture
def interval_session(make_step, make_step_element, make_repetition) -> SimpleWorkoutStructure:
    """10 min warmup, 3 x (5 min work + 3 min rest), 5 min cooldown (all seconds)."""
    return SimpleWorkoutStructure(
        structure=(
            make_step_element(600, IntensityClass.WARM_UP),
            make_repetition(
                3,
                [
                    make_step(300, IntensityClass.ACTIVE, "Work", (95, 105)),
                    make_step(180, IntensityClass.REST, "Rest", (0, 0)),
                ],
            ),
            make_step_element(300, IntensityClass.COOL_DOWN),
        )
    )
