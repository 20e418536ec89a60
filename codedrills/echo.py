"""Print command-line arguments separated by single spaces."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def join_args(args: Iterable[str]) -> str:
    """Join the arguments with a single space between each pair."""
    return " ".join(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Echo the arguments (excluding the program name) to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(join_args(args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())