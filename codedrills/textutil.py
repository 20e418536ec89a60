"""Small string helpers: path base names and digit grouping."""

from __future__ import annotations


def basename(s: str) -> str:
    """Drop directory components and the last ".suffix".

    For example "a/b.c.go" becomes "b.c".
    """
    s = s.rpartition("/")[2]
    head, dot, _ = s.rpartition(".")
    return head if dot else s


def comma(s: str) -> str:
    """Insert commas every three digits from the right of a decimal string."""
    first = len(s) % 3 or 3
    groups = [s[:first]]
    groups.extend(s[i : i + 3] for i in range(first, len(s), 3))
    return ",".join(groups)