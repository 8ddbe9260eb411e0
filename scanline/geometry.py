"""Points, vertices and displacement vectors in canvas space."""

from __future__ import annotations

import math
from typing import NamedTuple

from scanline.color import WHITE, Color


class Point(NamedTuple):
    x: float
    y: float


class Vertex(NamedTuple):
    point: Point
    color: Color

    @classmethod
    def at(cls, x, y, color: Color) -> Vertex:
        return cls(Point(float(x), float(y)), color)


# Slot 0 of every vertex table, so script indices can start at 1.
SENTINEL_VERTEX = Vertex(Point(0.0, 0.0), WHITE)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class Vector:
    """Mutable 2D displacement, indexable by axis (0 = x, 1 = y)."""

    __slots__ = ("v",)

    def __init__(self, x, y):
        self.v = [float(x), float(y)]

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Vector:
        return cls(p2[0] - p1[0], p2[1] - p1[1])

    def __getitem__(self, axis):
        return self.v[axis]

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.v == other.v

    def __repr__(self):
        return f"Vector({self.v[0]!r}, {self.v[1]!r})"

    @property
    def x(self):
        return self.v[0]

    @property
    def y(self):
        return self.v[1]

    def copy(self) -> Vector:
        return Vector(self.v[0], self.v[1])

    def magnitude(self) -> float:
        return math.hypot(self.v[0], self.v[1])

    def scale(self, factor) -> Vector:
        return Vector(self.v[0] * factor, self.v[1] * factor)

    def add(self, other: Vector) -> None:
        self.v[0] += other.v[0]
        self.v[1] += other.v[1]

    def reverse(self) -> None:
        self.v[0] = -self.v[0]
        self.v[1] = -self.v[1]

    def swap(self) -> None:
        self.v[0], self.v[1] = self.v[1], self.v[0]

    def offset(self, point: Point) -> Vector:
        """Position vector of ``point`` moved by this displacement."""
        return Vector(point[0] + self.v[0], point[1] + self.v[1])

    def to_point(self) -> Point:
        return Point(self.v[0], self.v[1])


def unit_step(delta: Vector, axis: int) -> Vector:
    """Scale ``delta`` so one step advances exactly one unit along ``axis``.

    Falls back to the other axis when ``delta`` has no extent along ``axis``,
    and to a zero vector when it has no extent at all.
    """
    extent = delta[axis]
    if extent == 0:
        extent = delta[1 - axis]
    if extent == 0:
        return Vector(0.0, 0.0)
    return delta.scale(1.0 / extent)


def first_sample(start: Point, step: Vector, axis: int) -> Vector:
    """Advance ``start`` along ``step`` onto the next integer grid line of ``axis``."""
    pre_step = step.scale(math.ceil(start[axis]) - start[axis])
    return pre_step.offset(start)
