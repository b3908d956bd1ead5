"""Two-dimensional points and basic vector operations."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

INF = 1e100
EPS = 1e-12


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, c: float) -> Point:
        return Point(self.x * c, self.y * c)

    def __truediv__(self, c: float) -> Point:
        return Point(self.x / c, self.y / c)

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"


def dot(p: Point, q: Point) -> float:
    return p.x * q.x + p.y * q.y


def dist2(p: Point, q: Point) -> float:
    """Squared distance between two points."""
    d = p - q
    return dot(d, d)


def cross(p: Point, q: Point) -> float:
    return p.x * q.y - p.y * q.x


def rotate_ccw90(p: Point) -> Point:
    return Point(-p.y, p.x)


def rotate_cw90(p: Point) -> Point:
    return Point(p.y, -p.x)


def rotate_ccw(p: Point, t: float) -> Point:
    """Rotate ``p`` counter-clockwise about the origin by ``t`` radians."""
    c, s = math.cos(t), math.sin(t)
    return Point(p.x * c - p.y * s, p.x * s + p.y * c)


def angle(v: Point, w: Point) -> float:
    """Angle in [0, pi] between two non-zero vectors."""
    cosine = dot(v, w) / abs(v) / abs(w)
    return math.acos(min(1.0, max(-1.0, cosine)))