"""Lines, segments and circles in the plane."""

from __future__ import annotations

import math

from contestlib.point import EPS, Point, cross, dist2, dot, rotate_ccw90, rotate_cw90


def lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True when line ab is parallel to (or the same as) line cd."""
    return abs(cross(b - a, c - d)) < EPS


def lines_collinear(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True when lines ab and cd are the same line."""
    return (
        lines_parallel(a, b, c, d)
        and abs(cross(a - b, a - c)) < EPS
        and abs(cross(c - d, c - a)) < EPS
    )


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True when segment ab meets segment cd."""
    if lines_collinear(a, b, c, d):
        if min(dist2(a, c), dist2(a, d), dist2(b, c), dist2(b, d)) < EPS:
            return True
        return not (dot(c - a, c - b) > 0 and dot(d - a, d - b) > 0 and dot(c - b, d - b) > 0)
    if cross(d - a, b - a) * cross(c - a, b - a) > 0:
        return False
    if cross(a - c, d - c) * cross(b - c, d - c) > 0:
        return False
    return True


def project_point_line(a: Point, b: Point, c: Point) -> Point:
    """Project ``c`` onto the line through ``a`` and ``b`` (``a != b``)."""
    return a + (b - a) * dot(c - a, b - a) / dot(b - a, b - a)


def project_point_segment(a: Point, b: Point, c: Point) -> Point:
    """Closest point to ``c`` on the segment from ``a`` to ``b``."""
    r = dot(b - a, b - a)
    if abs(r) < EPS:
        return a
    r = dot(c - a, b - a) / r
    if r < 0:
        return a
    if r > 1:
        return b
    return a + (b - a) * r


def distance_point_segment(a: Point, b: Point, c: Point) -> float:
    """Distance from ``c`` to the segment from ``a`` to ``b``."""
    return math.sqrt(dist2(c, project_point_segment(a, b, c)))


def distance_point_plane(
    x: float, y: float, z: float, a: float, b: float, c: float, d: float
) -> float:
    """Distance from point (x, y, z) to the plane ax + by + cz = d."""
    return abs(a * x + b * y + c * z - d) / math.sqrt(a * a + b * b + c * c)


def line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point:
    """Intersection of line ab with line cd; the lines must meet in one point."""
    b, d, c = b - a, c - d, c - a
    if dot(b, b) <= EPS or dot(d, d) <= EPS:
        raise ValueError("a line needs two distinct points")
    denominator = cross(b, d)
    if abs(denominator) < EPS:
        raise ValueError("lines are parallel")
    return a + b * cross(c, d) / denominator


def circle_center(a: Point, b: Point, c: Point) -> Point:
    """Centre of the circle through three points."""
    b = (a + b) / 2
    c = (a + c) / 2
    return line_intersection(b, b + rotate_cw90(a - b), c, c + rotate_cw90(a - c))


def circle_line_intersection(a: Point, b: Point, c: Point, r: float) -> list[Point]:
    """Points where the line through ``a`` and ``b`` meets the circle (c, r)."""
    b = b - a
    a = a - c
    big_a = dot(b, b)
    big_b = dot(a, b)
    big_c = dot(a, a) - r * r
    disc = big_b * big_b - big_a * big_c
    if disc < -EPS:
        return []
    points = [c + a + b * (-big_b + math.sqrt(max(0.0, disc + EPS))) / big_a]
    if disc > EPS:
        points.append(c + a + b * (-big_b - math.sqrt(disc)) / big_a)
    return points


def circle_circle_intersection(a: Point, b: Point, r: float, big_r: float) -> list[Point]:
    """Points where the circle (a, r) meets the circle (b, big_r)."""
    d = math.sqrt(dist2(a, b))
    if d > r + big_r or d + min(r, big_r) < max(r, big_r) or d == 0:
        return []
    x = (d * d - big_r * big_r + r * r) / (2 * d)
    y = math.sqrt(max(0.0, r * r - x * x))
    v = (b - a) / d
    points = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        points.append(a + v * x - rotate_ccw90(v) * y)
    return points