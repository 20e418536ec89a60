"""A set of small non-negative integers stored as a bit vector."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class IntSet:
    """A set of non-negative integers, one bit per possible member."""

    __slots__ = ("_bits",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._bits = 0
        for value in values:
            self.add(value)

    def has(self, x: int) -> bool:
        """Report whether the set contains x."""
        return x >= 0 and bool(self._bits >> x & 1)

    def add(self, x: int) -> None:
        """Add the non-negative value x; ValueError for a negative one."""
        if x < 0:
            raise ValueError(f"IntSet holds non-negative integers, not {x}")
        self._bits |= 1 << x

    def union_with(self, other: IntSet) -> None:
        """Make this set the union of itself and other."""
        self._bits |= other._bits

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and self.has(x)

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "{" + " ".join(str(x) for x in self) + "}"

    def __repr__(self) -> str:
        return f"IntSet({list(self)!r})"