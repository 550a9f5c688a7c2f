"""Simple → complete workout structure conversion.

Walks the ordered element list of a :class:`SimpleWorkoutStructure`,
accumulating elapsed time, and produces a :class:`WorkoutStructure` whose
elements carry absolute ``begin``/``end`` offsets and a polyline.

Timing rules:
    STEP element        duration = element.length.value
    REPETITION element  duration = sum(step.length.value) * element.length.value

Length values are used as given: the converter performs no unit
conversion. Builders normalize time lengths to seconds before a structure
reaches this module (see ``workout_structure.builders``).

All functions are pure (no I/O, no shared state).
"""

from __future__ import annotations

import numpy as np

from workout_structure.errors import StructureComputationError
from workout_structure.models.element import (
    CompleteStructureElement,
    Polyline,
    SimpleStructureElement,
)
from workout_structure.models.enums import ElementType
from workout_structure.models.structure import SimpleWorkoutStructure, WorkoutStructure

# Placeholder polyline anchor and per-point increment (not real GPS data).
_POLYLINE_ORIGIN = (40.7128, -74.006)
_POLYLINE_STEP = 0.001
_POLYLINE_MIN_POINTS = 2
_SECONDS_PER_POINT = 60


def calculate_element_duration(element: SimpleStructureElement) -> float:
    """Return the block duration of a single element.

    Raises:
        StructureComputationError: for a repetition element without steps.
    """
    if element.type == ElementType.REPETITION:
        if not element.steps:
            raise StructureComputationError(
                "Repetition element must have at least one step. "
                f"Found {len(element.steps)} steps.",
                element_type=element.type.value,
                step_count=len(element.steps),
            )
        steps_duration = sum(step.length.value for step in element.steps)
        return steps_duration * element.length.value
    return element.length.value


def calculate_total_duration(structure: SimpleWorkoutStructure) -> float:
    """Sum of all element durations; 0 for an empty structure."""
    total = 0
    for element in structure.structure:
        total += calculate_element_duration(element)
    return total


def generate_polyline(duration: float) -> Polyline:
    """Generate a deterministic placeholder polyline for *duration* seconds.

    One point per whole minute, never fewer than two points.
    """
    n_points = max(_POLYLINE_MIN_POINTS, int(duration // _SECONDS_PER_POINT))
    offsets = np.arange(n_points, dtype=np.float64) * _POLYLINE_STEP
    lats = _POLYLINE_ORIGIN[0] + offsets
    lngs = _POLYLINE_ORIGIN[1] + offsets
    return tuple((float(lat), float(lng)) for lat, lng in zip(lats, lngs))


def convert_element_to_complete(
    element: SimpleStructureElement,
    start_time: float,
) -> CompleteStructureElement:
    """Attach ``begin``/``end``/``polyline`` to *element* starting at *start_time*.

    Type, length and steps pass through unchanged.
    """
    duration = calculate_element_duration(element)
    return CompleteStructureElement(
        type=element.type,
        length=element.length,
        steps=element.steps,
        begin=start_time,
        end=start_time + duration,
        polyline=generate_polyline(duration),
    )


def convert_to_complete_structure(simple: SimpleWorkoutStructure) -> WorkoutStructure:
    """Convert a simple structure into a complete, timed structure.

    Each element begins where the previous one ended, starting at 0. The
    structure-wide ``intensity_target_type`` is carried over as
    ``primary_intensity_target_or_range``.

    Raises:
        StructureComputationError: if any repetition element has no steps.
            The message and ``element_index`` identify the offending
            element. No partial result is returned.
    """
    elements: list[CompleteStructureElement] = []
    elapsed = 0
    for index, element in enumerate(simple.structure):
        try:
            complete = convert_element_to_complete(element, elapsed)
        except StructureComputationError as exc:
            raise StructureComputationError(
                f"{exc} (element {index})",
                element_type=exc.element_type,
                step_count=exc.step_count,
                element_index=index,
            ) from exc
        elements.append(complete)
        elapsed = complete.end

    return WorkoutStructure(
        structure=tuple(elements),
        polyline=generate_polyline(elapsed),
        primary_length_metric=simple.primary_length_metric,
        primary_intensity_metric=simple.primary_intensity_metric,
        primary_intensity_target_or_range=simple.intensity_target_type,
    )
