"""Fast Walsh-Hadamard transforms for AND, OR and XOR convolutions."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

MOD = 998_244_353


class Convolution(IntEnum):
    AND = 0
    OR = 1
    XOR = 2


def fwht(a: Sequence[int], inverse: bool = False, kind: Convolution = Convolution.XOR) -> list[int]:
    """Transform ``a`` (length a power of two) modulo 998244353.

    The inverse transform undoes the forward one exactly, including the
    division by the length for XOR.
    """
    kind = Convolution(kind)
    size = len(a)
    if size == 0 or size & (size - 1):
        raise ValueError(f"length {size} is not a power of two")
    values = [x % MOD for x in a]
    length = 1
    while 2 * length <= size:
        for start in range(0, size, 2 * length):
            for j in range(start, start + length):
                x, y = values[j], values[j + length]
                if kind is Convolution.AND:
                    if inverse:
                        values[j], values[j + length] = (y - x) % MOD, x
                    else:
                        values[j], values[j + length] = y, (x + y) % MOD
                elif kind is Convolution.OR:
                    values[j + length] = (y - x) % MOD if inverse else (x + y) % MOD
                else:
                    values[j], values[j + length] = (x + y) % MOD, (x - y) % MOD
        length <<= 1
    if inverse and kind is Convolution.XOR:
        inv = pow(size, MOD - 2, MOD)
        values = [x * inv % MOD for x in values]
    return values


def convolve(a: Sequence[int], b: Sequence[int], kind: Convolution = Convolution.XOR) -> list[int]:
    """``c[i op j] += a[i] * b[j]`` modulo 998244353 for the chosen operation."""
    if len(a) != len(b):
        raise ValueError("inputs must have the same length")
    fa = fwht(a, False, kind)
    fb = fwht(b, False, kind)
    return fwht([x * y % MOD for x, y in zip(fa, fb)], True, kind)