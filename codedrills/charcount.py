"""Count Unicode characters and UTF-8 encoding lengths in input."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

UTF_MAX = 4

_RUNE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "'": "\\'",
    "\\": "\\\\",
}


@dataclass
class CharStats:
    """Character counts, counts by encoded length and invalid byte count."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield (character, byte length); an undecodable byte gives (None, 1)."""
    pos = 0
    while pos < len(data):
        n = _sequence_length(data[pos])
        chunk = data[pos : pos + n]
        if n and len(chunk) == n:
            try:
                yield chunk.decode("utf-8"), n
            except UnicodeDecodeError:
                pass
            else:
                pos += n
                continue
        yield None, 1
        pos += 1


def count_chars(data: bytes) -> CharStats:
    """Tally the characters of UTF-8 data; each bad byte counts as invalid."""
    stats = CharStats()
    for ch, n in _runes(data):
        if ch is None:
            stats.invalid += 1
            continue
        stats.counts[ch] += 1
        stats.utflen[n] += 1
    return stats


def _quote_rune(ch: str) -> str:
    if ch in _RUNE_ESCAPES:
        body = _RUNE_ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    elif ord(ch) < 0x80:
        body = f"\\x{ord(ch):02x}"
    elif ord(ch) <= 0xFFFF:
        body = f"\\u{ord(ch):04x}"
    else:
        body = f"\\U{ord(ch):08x}"
    return f"'{body}'"


def format_report(stats: CharStats) -> str:
    """Render the counts as tab-separated tables."""
    lines = ["rune\tcount\n"]
    lines.extend(f"{_quote_rune(ch)}\t{n}\n" for ch, n in stats.counts.items())
    lines.append("\nlen\tcount\n")
    lines.extend(
        f"{length}\t{n}\n" for length, n in enumerate(stats.utflen) if length > 0
    )
    if stats.invalid > 0:
        lines.append(f"\n{stats.invalid} invalid UTF-8 characters\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Count the characters of standard input and print the report."""
    try:
        data = sys.stdin.buffer.read()
    except OSError as err:
        print(f"charcount: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(format_report(count_chars(data)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())