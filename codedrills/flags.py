"""Parse a boolean, a string and an integer flag and print them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn


@dataclass(frozen=True)
class FlagValues:
    """The values of the command-line flags."""

    help: bool = False
    bool_flag: bool = False
    string_flag: str = "Hello There!"
    int_flag: int = 4


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ValueError(message)


def _build_parser() -> _Parser:
    parser = _Parser(prog="flags", add_help=False)
    parser.add_argument(
        "-help", "--help", dest="help", action="store_true", help="Show help"
    )
    parser.add_argument(
        "-boolFlag",
        "--boolFlag",
        dest="bool_flag",
        action="store_true",
        help="A boolean flag",
    )
    parser.add_argument(
        "-stringFlag",
        "--stringFlag",
        dest="string_flag",
        default="Hello There!",
        help="A string flag",
    )
    parser.add_argument(
        "-intFlag",
        "--intFlag",
        dest="int_flag",
        type=int,
        default=4,
        help="An integer flag",
    )
    return parser


def parse_flags(argv: Sequence[str]) -> FlagValues:
    """Parse the flags; ValueError for an unknown flag or a bad value."""
    ns = _build_parser().parse_args(list(argv))
    return FlagValues(
        help=ns.help,
        bool_flag=ns.bool_flag,
        string_flag=ns.string_flag,
        int_flag=ns.int_flag,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the flag values, or the usage with -help."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        flags = parse_flags(args)
    except ValueError as err:
        print(err, file=sys.stderr)
        _build_parser().print_help(file=sys.stderr)
        return 2

    if flags.help:
        _build_parser().print_help(file=sys.stderr)
        return 0

    print("Boolean Flag is ", str(flags.bool_flag).lower())
    print("String Flag is ", flags.string_flag)
    print("Int Flag is ", flags.int_flag)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())