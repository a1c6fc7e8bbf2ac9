"""Static distance and time unit tables.

``DISTANCE_UNITS`` is ordered by factor ascending and ``TIME_UNITS`` by factor
descending. The calculator relies on the time table being scanned from the
largest unit to the smallest, so do not reorder it.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DistanceUnit:
    name: str
    symbol: str
    factor: float  # meters per unit


@dataclass(frozen=True)
class TimeUnit:
    name: str
    factor: float  # seconds per unit
    singular: str
    plural: str

    def label(self, value: float) -> str:
        """Singular name for exactly one, plural otherwise."""
        return self.singular if value == 1 else self.plural


DISTANCE_UNITS: Tuple[DistanceUnit, ...] = (
    # Metric
    DistanceUnit("Yoctometers", "ym", 1e-24),
    DistanceUnit("Zeptometers", "zm", 1e-21),
    DistanceUnit("Attometers", "am", 1e-18),
    DistanceUnit("Femtometers", "fm", 1e-15),
    DistanceUnit("Picometers", "pm", 1e-12),
    DistanceUnit("Nanometers", "nm", 1e-9),
    DistanceUnit("Micrometers", "μm", 1e-6),
    DistanceUnit("Millimeters", "mm", 1e-3),
    DistanceUnit("Centimeters", "cm", 1e-2),
    DistanceUnit("Meters", "m", 1),
    DistanceUnit("Kilometers", "km", 1e3),
    DistanceUnit("Megameters", "Mm", 1e6),
    DistanceUnit("Gigameters", "Gm", 1e9),
    DistanceUnit("Terameters", "Tm", 1e12),
    DistanceUnit("Petameters", "Pm", 1e15),
    DistanceUnit("Exameters", "Em", 1e18),
    DistanceUnit("Zettameters", "Zm", 1e21),
    DistanceUnit("Yottameters", "Ym", 1e24),
    # Astronomical
    DistanceUnit("Astronomical Units", "au", 149597870700),
    DistanceUnit("Light Years", "ly", 9460730472580800),
    DistanceUnit("Parsecs", "pc", 3.085677581491367e16),
)

TIME_UNITS: Tuple[TimeUnit, ...] = (
    TimeUnit("Millennia", 31557600000, "Light Millennium", "Light Millennia"),
    TimeUnit("Centuries", 3155760000, "Light Century", "Light Centuries"),
    TimeUnit("Decades", 315576000, "Light Decade", "Light Decades"),
    TimeUnit("Years", 31557600, "Light Year", "Light Years"),
    TimeUnit("Months", 2629800, "Light Month", "Light Months"),
    TimeUnit("Weeks", 604800, "Light Week", "Light Weeks"),
    TimeUnit("Days", 86400, "Light Day", "Light Days"),
    TimeUnit("Hours", 3600, "Light Hour", "Light Hours"),
    TimeUnit("Minutes", 60, "Light Minute", "Light Minutes"),
    TimeUnit("Seconds", 1, "Light Second", "Light Seconds"),
    TimeUnit("Milliseconds", 1e-3, "Light Millisecond", "Light Milliseconds"),
    TimeUnit("Microseconds", 1e-6, "Light Microsecond", "Light Microseconds"),
    TimeUnit("Nanoseconds", 1e-9, "Light Nanosecond", "Light Nanoseconds"),
    TimeUnit("Picoseconds", 1e-12, "Light Picosecond", "Light Picoseconds"),
    TimeUnit("Femtoseconds", 1e-15, "Light Femtosecond", "Light Femtoseconds"),
    TimeUnit("Attoseconds", 1e-18, "Light Attosecond", "Light Attoseconds"),
    TimeUnit("Zeptoseconds", 1e-21, "Light Zeptosecond", "Light Zeptoseconds"),
    TimeUnit("Yoctoseconds", 1e-24, "Light Yoctosecond", "Light Yoctoseconds"),
)

# Smallest time unit, used when a duration is below one of every table entry
YOCTOSECONDS = TIME_UNITS[-1]


def find_distance_unit(symbol: str) -> DistanceUnit:
    """Return the distance unit with the given symbol.

    Raises
    ------
    KeyError
        If no unit uses ``symbol``.
    """
    for unit in DISTANCE_UNITS:
        if unit.symbol == symbol:
            return unit
    raise KeyError(f"Unknown distance unit '{symbol}'")


def find_time_unit(name: str) -> TimeUnit:
    """Return the time unit matching ``name``, its singular or its plural."""
    for unit in TIME_UNITS:
        if name in (unit.name, unit.singular, unit.plural):
            return unit
    raise KeyError(f"Unknown time unit '{name}'")
