"""Command line front end for the light time calculator."""

import argparse
import logging

from . import constants as C
from .calculator import LightTimeError, calculate_light_time, express_in_all_units, light_time_seconds
from .units import DISTANCE_UNITS, find_distance_unit
from .utils import distance_to_display, light_time_to_display

logger = logging.getLogger(__name__)


def _precision(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"precision must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lighttime",
        description="Convert a distance into the time light takes to travel it",
    )
    parser.add_argument("distance", nargs="?", type=float, help="Distance value")
    parser.add_argument(
        "unit",
        nargs="?",
        default=C.DEFAULT_DISTANCE_UNIT,
        help="Distance unit symbol (default: %(default)s)",
    )
    parser.add_argument("--all", action="store_true", help="Show the light time in every time unit")
    parser.add_argument(
        "--precision",
        type=_precision,
        default=C.DEFAULT_PRECISION,
        help="Significant digits in the output",
    )
    parser.add_argument("--list-units", action="store_true", help="List distance unit symbols and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``lighttime``. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_units:
        for unit in DISTANCE_UNITS:
            print(f"{unit.symbol:>3}  {unit.name} ({unit.factor:g} m)")
        return 0

    if args.distance is None:
        parser.error("the distance argument is required")
    try:
        unit = find_distance_unit(args.unit)
    except KeyError:
        parser.error(f"unknown distance unit '{args.unit}' (see --list-units)")

    result = calculate_light_time(args.distance, unit.factor)
    if isinstance(result, LightTimeError):
        logger.error(result.error)
        return 1

    print(f"{distance_to_display(args.distance, unit, args.precision)} = "
          f"{light_time_to_display(result, args.precision)}")
    if args.all:
        seconds = light_time_seconds(args.distance, unit.factor)
        for time_unit, value in express_in_all_units(seconds):
            print(f"  {value:.{args.precision}g} {time_unit.label(value)}")
    return 0
