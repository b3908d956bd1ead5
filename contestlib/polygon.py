"""Area, centroid, simplicity and point location for polygons."""

from __future__ import annotations

from collections.abc import Sequence

from contestlib.planar import segments_intersect
from contestlib.point import EPS, Point, cross, dot


def _edges(points: Sequence[Point]):
    return zip(points, [*points[1:], *points[:1]])


def signed_area(points: Sequence[Point]) -> float:
    """Signed area, positive for counter-clockwise vertex order."""
    return sum(p.x * q.y - q.x * p.y for p, q in _edges(points)) / 2.0


def area(points: Sequence[Point]) -> float:
    return abs(signed_area(points))


def centroid(points: Sequence[Point]) -> Point:
    """Centroid of a (possibly non-convex) polygon."""
    scale = 6.0 * signed_area(points)
    if scale == 0:
        raise ValueError("polygon has zero area")
    cx = cy = 0.0
    for p, q in _edges(points):
        w = p.x * q.y - q.x * p.y
        cx += (p.x + q.x) * w
        cy += (p.y + q.y) * w
    return Point(cx / scale, cy / scale)


def is_simple(points: Sequence[Point]) -> bool:
    """True when no two non-adjacent edges of the polygon meet."""
    n = len(points)
    for i in range(n):
        j = (i + 1) % n
        for k in range(i + 1, n):
            m = (k + 1) % n
            if i == m or j == k:
                continue
            if segments_intersect(points[i], points[j], points[k], points[m]):
                return False
    return True


def _on_segment(s: Point, e: Point, p: Point) -> bool:
    return abs(cross(s - p, e - p)) < EPS and dot(s - p, e - p) <= EPS


def point_in_polygon(points: Sequence[Point], a: Point) -> int:
    """-1 strictly inside, 0 on the boundary, 1 strictly outside."""
    inside = False
    for p, q in _edges(points):
        if _on_segment(p, q, a):
            return 0
        crossing = (int(a.y < p.y) - int(a.y < q.y)) * cross(p - a, q - a) > 0
        inside ^= crossing
    return -1 if inside else 1


def point_in_convex_polygon(points: Sequence[Point], q: Point) -> int:
    """Like :func:`point_in_polygon` for a counter-clockwise convex polygon, in O(log n)."""
    n = len(points)
    if n < 3:
        raise ValueError("polygon needs at least three vertices")
    origin = points[0] - q
    a = cross(origin, points[1] - q)
    b = cross(origin, points[n - 1] - q)
    if a < 0 or b > 0:
        return 1
    lo, hi = 1, n - 1
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if cross(origin, points[mid] - q) >= 0:
            lo = mid
        else:
            hi = mid
    k = cross(points[lo] - q, points[hi] - q)
    if k <= 0:
        return 1 if k < 0 else 0
    if lo == 1 and a == 0:
        return 0
    if hi == n - 1 and b == 0:
        return 0
    return -1