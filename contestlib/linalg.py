"""Determinant by Gaussian elimination with partial pivoting."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-9


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant of a square matrix; pivots below 1e-9 count as zero."""
    a = [[float(x) for x in row] for row in matrix]
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    det = 1.0
    for i in range(n):
        k = max(range(i, n), key=lambda j: abs(a[j][i]))
        if abs(a[k][i]) < EPS:
            return 0.0
        if k != i:
            a[i], a[k] = a[k], a[i]
            det = -det
        pivot_row = a[i]
        pivot = pivot_row[i]
        det *= pivot
        pivot_row[i + 1:] = [x / pivot for x in pivot_row[i + 1:]]
        for j, row in enumerate(a):
            factor = row[i]
            if j != i and abs(factor) > EPS:
                row[i + 1:] = [x - p * factor for x, p in zip(row[i + 1:], pivot_row[i + 1:])]
    return det