"""Polynomial multiplication with a floating-point FFT."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence
from itertools import zip_longest

MOD = 1_000_000_007


def _transform(values: Sequence[complex], invert: bool) -> list[complex]:
    a = list(values)
    n = len(a)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    length = 2
    while length <= n:
        half = length // 2
        step = (-2 if invert else 2) * math.pi / length
        roots = [cmath.rect(1.0, step * k) for k in range(half)]
        for start in range(0, n, length):
            for k, w in enumerate(roots):
                u = a[start + k]
                v = a[start + k + half] * w
                a[start + k] = u + v
                a[start + k + half] = u - v
        length <<= 1
    if invert:
        a = [x / n for x in a]
    return a


def _size(n: int, m: int) -> tuple[int, int]:
    result = n + m - 1
    return result, 1 << (result - 1).bit_length()


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two integer polynomials, coefficients rounded to integers."""
    if not a or not b:
        return []
    result, sz = _size(len(a), len(b))
    packed = [complex(x, y) for x, y in zip_longest(a, b, fillvalue=0)]
    packed += [0j] * (sz - len(packed))
    f = _transform(packed, False)
    product = []
    for k, fk in enumerate(f):
        fj = f[-k % sz].conjugate()
        product.append((fk + fj) * (fk - fj) / 4j)
    c = _transform(product, True)
    return [round(z.real) for z in c[:result]]


def multiply_mod(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two polynomials with coefficients taken modulo 1e9+7."""
    if not a or not b:
        return []
    result, sz = _size(len(a), len(b))

    def split(values: Sequence[int]) -> list[complex]:
        out = [complex(x & 32767, x >> 15) for x in (v % MOD for v in values)]
        return out + [0j] * (sz - len(out))

    f = _transform(split(a), False)
    g = _transform(split(b), False)
    low_parts, high_parts = [], []
    for k in range(sz):
        j = -k % sz
        fj, gj = f[j].conjugate(), g[j].conjugate()
        al, ah = (f[k] + fj) / 2, (f[k] - fj) / 2j
        bl, bh = (g[k] + gj) / 2, (g[k] - gj) / 2j
        low_parts.append(al * bl + 1j * al * bh)
        high_parts.append(ah * bl + 1j * ah * bh)
    u = _transform(low_parts, True)
    v = _transform(high_parts, True)
    out = []
    for lo, hi in zip(u[:result], v[:result]):
        ll = round(lo.real) % MOD
        lh = round(lo.imag) % MOD
        hl = round(hi.real) % MOD
        hh = round(hi.imag) % MOD
        out.append((ll + ((lh + hl) << 15) + (hh << 30)) % MOD)
    return out