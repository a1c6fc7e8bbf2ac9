"""Display helpers for calculator results."""

from . import constants as C
from .calculator import LightTime, LightTimeError
from .units import DistanceUnit


def light_time_to_display(result: LightTime, precision: int = C.DEFAULT_PRECISION) -> str:
    if isinstance(result, LightTimeError):
        return result.error
    return f"{result.value:.{precision}g} {result.unit}"


def distance_to_display(distance: float, unit: DistanceUnit, precision: int = C.DEFAULT_PRECISION) -> str:
    return f"{distance:.{precision}g} {unit.symbol}"
