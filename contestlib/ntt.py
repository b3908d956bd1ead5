"""Number-theoretic transform modulo 998244353."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 998_244_353
G = 3


def ntt(a: Sequence[int], invert: bool = False) -> list[int]:
    """Forward (or inverse) transform of ``a``; its length must be a power of two."""
    n = len(a)
    if n == 0 or n & (n - 1) or (MOD - 1) % n:
        raise ValueError(f"length {n} is not a supported power of two")
    values = [x % MOD for x in a]
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            values[i], values[j] = values[j], values[i]
    length = 2
    while length <= n:
        half = length // 2
        root = pow(G, (MOD - 1) // length, MOD)
        if invert:
            root = pow(root, MOD - 2, MOD)
        for start in range(0, n, length):
            w = 1
            for k in range(start, start + half):
                u = values[k]
                v = values[k + half] * w % MOD
                values[k] = (u + v) % MOD
                values[k + half] = (u - v) % MOD
                w = w * root % MOD
        length <<= 1
    if invert:
        inv_n = pow(n, MOD - 2, MOD)
        values = [x * inv_n % MOD for x in values]
    return values


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two polynomials modulo 998244353."""
    if not a or not b:
        return []
    result = len(a) + len(b) - 1
    sz = 1 << (result - 1).bit_length()
    fa = ntt(list(a) + [0] * (sz - len(a)))
    fb = ntt(list(b) + [0] * (sz - len(b)))
    return ntt([x * y % MOD for x, y in zip(fa, fb)], invert=True)[:result]


def primitive_root(p: int) -> int:
    """Smallest primitive root modulo the prime ``p``."""
    if p < 2:
        raise ValueError("p must be a prime")
    factors = []
    rest = p - 1
    d = 2
    while d * d <= rest:
        if rest % d == 0:
            factors.append(d)
            while rest % d == 0:
                rest //= d
        d += 1
    if rest != 1:
        factors.append(rest)
    root = 1
    while any(pow(root, (p - 1) // f, p) == 1 for f in factors):
        root += 1
    return root