"""Celsius and Fahrenheit conversions and temperature parsing."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from typing import NewType

Celsius = NewType("Celsius", float)
Fahrenheit = NewType("Fahrenheit", float)

ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0.0)
BOILING_C = Celsius(100.0)

BOILING_F = Fahrenheit(212.0)
FREEZING_F = Fahrenheit(32.0)

_TEMPERATURE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(\S*)"
)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def parse_temperature(text: str) -> Celsius:
    """Parse a quantity with a unit, such as "100C" or "-40F", into Celsius.

    Raises ValueError if the text has no number or the unit is not C or F.
    """
    match = _TEMPERATURE.match(text)
    if match:
        value = float(match.group(1))
        unit = match.group(2)
        if unit == "C":
            return Celsius(value)
        if unit == "F":
            return f_to_c(value)
    raise ValueError(f"invalid temperature {text!r}")


def _g(x: float) -> str:
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


def _temperature_arg(text: str) -> Celsius:
    try:
        return parse_temperature(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def main(argv: Sequence[str] | None = None) -> int:
    """Print the boiling and freezing conversions and the chosen temperature."""
    parser = argparse.ArgumentParser(prog="tempconv")
    parser.add_argument(
        "--temp",
        type=_temperature_arg,
        default=Celsius(20.0),
        help="the temperature, with a unit, e.g. 100C or 212F",
    )
    args = parser.parse_args(argv)

    print(f"boiling point = {_g(BOILING_F)}°F or {_g(f_to_c(BOILING_F))}°C")
    for f in (FREEZING_F, BOILING_F):
        print(f"{_g(f)}°F = {_g(f_to_c(f))}°C")
    print(_g(args.temp))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())