"""Enumerations and unit constants for workout structures.

Enum values are the TrainingPeaks structure-schema vocabulary, so members
serialize directly to the wire format.
"""

from enum import Enum


class LengthUnit(str, Enum):
    """Unit of a step or element length."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    METER = "meter"
    KILOMETER = "kilometer"
    MILE = "mile"
    REPETITION = "repetition"


class ElementType(str, Enum):
    """Top-level structure element kinds."""

    STEP = "step"            # Single pass through its steps
    REPETITION = "repetition"  # Steps repeated length.value times


class IntensityClass(str, Enum):
    """Intensity classification of a single step."""

    ACTIVE = "active"
    REST = "rest"
    WARM_UP = "warmUp"
    COOL_DOWN = "coolDown"


class LengthMetric(str, Enum):
    """Whether the workout is primarily measured in time or distance."""

    DURATION = "duration"
    DISTANCE = "distance"


class IntensityMetric(str, Enum):
    """Scale that step targets are expressed in."""

    PERCENT_OF_THRESHOLD_PACE = "percentOfThresholdPace"
    PERCENT_OF_THRESHOLD_POWER = "percentOfThresholdPower"
    HEART_RATE = "heartRate"
    POWER = "power"
    PACE = "pace"
    SPEED = "speed"


class IntensityTargetType(str, Enum):
    """Single-value targets vs. min/max ranges."""

    TARGET = "target"
    RANGE = "range"


# ---------------------------------------------------------------------------
# Unit classification
# ---------------------------------------------------------------------------
TIME_UNITS = frozenset({LengthUnit.SECOND, LengthUnit.MINUTE, LengthUnit.HOUR})
DISTANCE_UNITS = frozenset({LengthUnit.METER, LengthUnit.KILOMETER, LengthUnit.MILE})
# Units the TrainingPeaks structure document accepts.
WIRE_UNITS = frozenset({LengthUnit.SECOND, LengthUnit.METER, LengthUnit.REPETITION})

# ---------------------------------------------------------------------------
# Conversion factors
# ---------------------------------------------------------------------------
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
METERS_PER_KILOMETER = 1000
METERS_PER_MILE = 1609.344  # International mile

# ---------------------------------------------------------------------------
# Validation limits
# ---------------------------------------------------------------------------
MAX_STEP_NAME_LENGTH = 100
