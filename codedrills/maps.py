"""Map helpers: equality, list-keyed counting and a directed graph."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_MISSING = object()


def _quote(s: str) -> str:
    parts = ['"']
    for ch in s:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


def equal(x: Mapping[str, int], y: Mapping[str, int]) -> bool:
    """Report whether both maps hold the same keys with the same values.

    A missing key is not the same as a key whose value is zero.
    """
    if len(x) != len(y):
        return False
    return all(y.get(k, _MISSING) == v for k, v in x.items())


def key_of(items: Iterable[str]) -> str:
    """Turn a list of strings into a string key, quoting each element."""
    return "[" + " ".join(_quote(item) for item in items) + "]"


@dataclass
class ListCounter:
    """Count how often each list of strings has been added."""

    counts: Counter[str] = field(default_factory=Counter)

    def add(self, items: Iterable[str]) -> None:
        """Record one more occurrence of the list."""
        self.counts[key_of(items)] += 1

    def count(self, items: Iterable[str]) -> int:
        """Return how often the list has been added."""
        return self.counts[key_of(items)]


@dataclass
class Graph:
    """A directed graph mapping each vertex to its set of successors."""

    edges: defaultdict[str, set[str]] = field(
        default_factory=lambda: defaultdict(set)
    )

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from src to dst."""
        self.edges[src].add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from src to dst."""
        successors = self.edges.get(src)
        return successors is not None and dst in successors