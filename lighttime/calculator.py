"""Light travel time for a distance, expressed in the most readable time unit."""

import logging
import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

import numpy as np

from .constants import SPEED_OF_LIGHT
from .units import TIME_UNITS, YOCTOSECONDS, TimeUnit

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    INVALID_DISTANCE = "Invalid distance: Must be a number."
    INVALID_DISTANCE_FACTOR = "Invalid distanceFactor: Must be a number."
    NEGATIVE_DISTANCE = "Distance cannot be negative."
    NON_POSITIVE_FACTOR = "Distance factor must be positive."


@dataclass(frozen=True)
class LightTimeResult:
    value: float
    unit: str

    def as_dict(self) -> dict:
        return {"value": self.value, "unit": self.unit}


@dataclass(frozen=True)
class LightTimeError:
    kind: ErrorKind

    @property
    def error(self) -> str:
        return self.kind.value

    def as_dict(self) -> dict:
        return {"error": self.error}


LightTime = Union[LightTimeResult, LightTimeError]


def _is_number(value) -> bool:
    # bool is an int subclass but never a distance
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    # NaN is the only value unequal to itself
    return value == value


def _validate(distance, distance_factor):
    """Return the first failing check, in a fixed order, or None."""
    if not _is_number(distance):
        return ErrorKind.INVALID_DISTANCE
    if not _is_number(distance_factor):
        return ErrorKind.INVALID_DISTANCE_FACTOR
    if distance < 0:
        return ErrorKind.NEGATIVE_DISTANCE
    if distance_factor <= 0:
        return ErrorKind.NON_POSITIVE_FACTOR
    return None


def calculate_light_time(distance, distance_factor) -> LightTime:
    """Return the time light needs to cover ``distance``.

    Parameters
    ----------
    distance : float
        Magnitude of the distance in some unit. Must be non-negative.
    distance_factor : float
        Meters in one unit of ``distance``. Must be positive.

    Returns
    -------
    LightTimeResult or LightTimeError
        The duration in the largest time unit that keeps the value at or
        above one, or the first validation failure. Inputs are never raised
        on; callers check ``isinstance(result, LightTimeError)``.
    """
    kind = _validate(distance, distance_factor)
    if kind is not None:
        logger.debug("Rejected distance=%r factor=%r: %s", distance, distance_factor, kind.value)
        return LightTimeError(kind)

    if distance == 0:
        return LightTimeResult(0, "Light Seconds")

    try:
        time_in_seconds = distance * distance_factor / SPEED_OF_LIGHT
    except OverflowError:
        # ints beyond float range
        time_in_seconds = math.inf

    for unit in TIME_UNITS:
        time_in_unit = time_in_seconds / unit.factor
        if time_in_unit >= 1:
            logger.debug("%.6g s of light time selected %s", time_in_seconds, unit.name)
            return LightTimeResult(time_in_unit, unit.label(time_in_unit))

    # shorter than a yoctosecond
    yoctoseconds = time_in_seconds / YOCTOSECONDS.factor
    return LightTimeResult(yoctoseconds, YOCTOSECONDS.label(yoctoseconds))


def light_time_seconds(distance, distance_factor=1.0):
    """Raw light travel time in seconds.

    Broadcasts over array-like ``distance``; a scalar input gives a float.
    No validation is done here.
    """
    seconds = np.asarray(distance, dtype=float) * distance_factor / SPEED_OF_LIGHT
    if seconds.ndim == 0:
        return float(seconds)
    return seconds


def express_in_all_units(seconds: float) -> List[Tuple[TimeUnit, float]]:
    """Express ``seconds`` in every time unit, largest unit first."""
    factors = np.array([unit.factor for unit in TIME_UNITS], dtype=float)
    values = seconds / factors
    return [(unit, float(value)) for unit, value in zip(TIME_UNITS, values)]
