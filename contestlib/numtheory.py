"""Extended Euclid and linear Diophantine equations.

Division and remainder truncate towards zero, as fixed-width integer
arithmetic does, so signs of the returned coefficients follow that rule.
"""

from __future__ import annotations

import math


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    return a - b * _tdiv(a, b)


def exgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``a*x + b*y == d`` and ``|d| == gcd(a, b)``."""
    if b == 0:
        return a, 1, 0
    d, x1, y1 = exgcd(b, _tmod(a, b))
    return d, y1, x1 - _tdiv(a, b) * y1


def diophantine(a: int, b: int, c: int) -> tuple[int, int] | None:
    """One solution ``(x, y)`` of ``a*x + b*y == c``, or ``None`` if there is none."""
    if a == 0 and b == 0:
        return (0, 0) if c == 0 else None
    d, x, y = exgcd(a, b)
    if _tmod(c, d):
        return None
    k = _tdiv(c, d)
    return x * k, y * k


def count_solutions(a: int, b: int, c: int, minx: int, maxx: int, miny: int, maxy: int) -> int:
    """Number of solutions of ``a*x + b*y == c`` with x in [minx, maxx], y in [miny, maxy]."""
    solution = diophantine(a, b, c)
    if solution is None:
        return 0
    if a == 0 and b == 0:
        return (maxx - minx + 1) * (maxy - miny + 1)
    if a == 0:
        q = _tdiv(c, b)
        return (maxx - minx + 1) * int(miny <= q <= maxy)
    if b == 0:
        q = _tdiv(c, a)
        return (maxy - miny + 1) * int(minx <= q <= maxx)

    g = math.gcd(a, b)
    a, b = _tdiv(a, g), _tdiv(b, g)
    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1
    x, y = solution

    def shift(cnt: int) -> None:
        nonlocal x, y
        x += cnt * b
        y -= cnt * a

    shift(_tdiv(minx - x, b))
    if x < minx:
        shift(sign_b)
    if x > maxx:
        return 0
    lx1 = x
    shift(_tdiv(maxx - x, b))
    if x > maxx:
        shift(-sign_b)
    rx1 = x

    shift(-_tdiv(miny - y, a))
    if y < miny:
        shift(-sign_a)
    if y > maxy:
        return 0
    lx2 = x
    shift(-_tdiv(maxy - y, a))
    if y > maxy:
        shift(sign_a)
    rx2 = x

    if lx2 > rx2:
        lx2, rx2 = rx2, lx2
    lx = max(lx1, lx2)
    rx = min(rx1, rx2)
    if lx > rx:
        return 0
    return (rx - lx) // abs(b) + 1