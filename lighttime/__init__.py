"""Light travel time calculator."""

from importlib.metadata import PackageNotFoundError, version

from .constants import SPEED_OF_LIGHT
from .units import (
    DISTANCE_UNITS,
    TIME_UNITS,
    DistanceUnit,
    TimeUnit,
    find_distance_unit,
    find_time_unit,
)
from .calculator import (
    ErrorKind,
    LightTimeError,
    LightTimeResult,
    calculate_light_time,
    express_in_all_units,
    light_time_seconds,
)

try:
    __version__ = version("lighttime")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "SPEED_OF_LIGHT",
    "DISTANCE_UNITS",
    "TIME_UNITS",
    "DistanceUnit",
    "TimeUnit",
    "find_distance_unit",
    "find_time_unit",
    "ErrorKind",
    "LightTimeError",
    "LightTimeResult",
    "calculate_light_time",
    "express_in_all_units",
    "light_time_seconds",
    "__version__",
]
