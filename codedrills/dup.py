"""Find repeated lines in input, or drop repeated lines from it."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence


def _strip_eol(line: str) -> str:
    line = line[:-1] if line.endswith("\n") else line
    return line[:-1] if line.endswith("\r") else line


def count_lines(lines: Iterable[str]) -> Counter[str]:
    """Count how often each line occurs; line endings are not part of a line."""
    return Counter(_strip_eol(line) for line in lines)


def duplicates(counts: Mapping[str, int]) -> dict[str, int]:
    """Return the lines that occur more than once, with their counts."""
    return {line: n for line, n in counts.items() if n > 1}


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line the first time it is seen."""
    seen: set[str] = set()
    for raw in lines:
        line = _strip_eol(raw)
        if line not in seen:
            seen.add(line)
            yield line


def main(argv: Sequence[str] | None = None) -> int:
    """Report duplicated lines in the named files or standard input."""
    parser = argparse.ArgumentParser(prog="dup")
    parser.add_argument(
        "-u",
        "--unique",
        action="store_true",
        help="print each distinct line of standard input once instead",
    )
    parser.add_argument("files", nargs="*")
    args = parser.parse_args(argv)

    if args.unique:
        try:
            for line in dedup(sys.stdin):
                print(line)
        except OSError as err:
            print(f"dedup: {err}", file=sys.stderr)
            return 1
        return 0

    counts: Counter[str] = Counter()
    if not args.files:
        counts.update(count_lines(sys.stdin))
    else:
        for path in args.files:
            try:
                with open(path, encoding="utf-8", errors="replace") as f:
                    counts.update(count_lines(f))
            except OSError as err:
                print(f"dup2: {err}", file=sys.stderr)
                continue

    for line, n in duplicates(counts).items():
        print(line, " ", n)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())