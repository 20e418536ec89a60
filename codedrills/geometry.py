"""Points, coloured points, paths and a linked list of integers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import pairwise
from typing import NamedTuple


@dataclass
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, q: Point) -> float:
        """Return the straight-line distance from this point to q."""
        return math.hypot(q.x - self.x, q.y - self.y)

    def scale_by(self, factor: float) -> None:
        """Multiply both coordinates by factor, in place."""
        self.x *= factor
        self.y *= factor

    def add(self, q: Point) -> Point:
        """Return the sum of this point and q."""
        return Point(self.x + q.x, self.y + q.y)

    def sub(self, q: Point) -> Point:
        """Return this point minus q."""
        return Point(self.x - q.x, self.y - q.y)


def distance(p: Point, q: Point) -> float:
    """Return the straight-line distance between p and q."""
    return p.distance(q)


class RGBA(NamedTuple):
    """A colour with red, green, blue and alpha channels of 0 to 255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


@dataclass
class ColoredPoint:
    """A point with a colour; the point's fields and methods are exposed directly.

    The point is held by reference, so two coloured points may share one.
    """

    point: Point = field(default_factory=Point)
    color: RGBA = field(default_factory=RGBA)

    @property
    def x(self) -> float:
        return self.point.x

    @x.setter
    def x(self, value: float) -> None:
        self.point.x = value

    @property
    def y(self) -> float:
        return self.point.y

    @y.setter
    def y(self, value: float) -> None:
        self.point.y = value

    def distance(self, q: Point) -> float:
        """Return the distance from this point to q."""
        return self.point.distance(q)

    def scale_by(self, factor: float) -> None:
        """Scale the underlying point in place."""
        self.point.scale_by(factor)

    def add(self, q: Point) -> Point:
        """Return the sum of the underlying point and q."""
        return self.point.add(q)

    def sub(self, q: Point) -> Point:
        """Return the underlying point minus q."""
        return self.point.sub(q)


class Path(list[Point]):
    """A sequence of points joined by straight lines."""

    def distance(self) -> float:
        """Return the distance travelled along the path."""
        return sum((p.distance(q) for p, q in pairwise(self)), 0.0)

    def translate_by(self, offset: Point, add: bool) -> None:
        """Shift every point by offset, adding it or subtracting it."""
        op = Point.add if add else Point.sub
        self[:] = [op(p, offset) for p in self]


@dataclass
class IntList:
    """A linked list of integers; None stands for the empty list."""

    value: int
    tail: IntList | None = None


def list_sum(lst: IntList | None) -> int:
    """Return the sum of the list's elements; zero for the empty list."""
    total = 0
    node = lst
    while node is not None:
        total += node.value
        node = node.tail
    return total