"""Convex hull trick for maximum queries over lines."""

from __future__ import annotations


class ConvexHullTrick:
    """Upper envelope of lines ``y = m*x + b``.

    Lines must be added in decreasing order of slope and queries must come
    with non-increasing ``x``; each query returns the maximum value.
    """

    def __init__(self) -> None:
        self._lines: list[tuple[int, int]] = []
        self._ptr = 0

    @staticmethod
    def _bad(l1: tuple[int, int], l2: tuple[int, int], l3: tuple[int, int]) -> bool:
        (m1, b1), (m2, b2), (m3, b3) = l1, l2, l3
        return (b3 - b1) * (m1 - m2) <= (b2 - b1) * (m1 - m3)

    def insert_line(self, m: int, b: int) -> None:
        lines = self._lines
        lines.append((m, b))
        while len(lines) >= 3 and self._bad(lines[-1], lines[-2], lines[-3]):
            del lines[-2]

    def query(self, x: int) -> int:
        lines = self._lines
        if not lines:
            raise ValueError("no lines inserted")
        self._ptr = min(self._ptr, len(lines) - 1)

        def value(i: int) -> int:
            m, b = lines[i]
            return m * x + b

        while self._ptr < len(lines) - 1 and value(self._ptr + 1) > value(self._ptr):
            self._ptr += 1
        return value(self._ptr)