"""Stirling numbers of both kinds modulo 998244353."""

from __future__ import annotations

import math

from contestlib.ntt import MOD, multiply


def _check(n: int, k: int = 0) -> None:
    if n < 0 or k < 0:
        raise ValueError("arguments must be non-negative")


def stirling2(n: int, k: int) -> int:
    """Partitions of n labelled objects into k non-empty subsets, in O(k log n)."""
    _check(n, k)
    total = 0
    for i in range(k + 1):
        term = math.comb(k, i) * pow(k - i, n, MOD) % MOD
        total += -term if i & 1 else term
    return total % MOD * pow(math.factorial(k) % MOD, MOD - 2, MOD) % MOD


def stirling1_row(n: int) -> list[int]:
    """Unsigned Stirling numbers of the first kind c(n, 0..n).

    They are the coefficients of x(x+1)...(x+n-1).
    """
    _check(n)
    polys = [[i, 1] for i in range(n)] or [[1]]
    while len(polys) > 1:
        paired = [multiply(p, q) for p, q in zip(polys[::2], polys[1::2])]
        if len(polys) % 2:
            paired.append(polys[-1])
        polys = paired
    return polys[0]


def stirling1(n: int, k: int) -> int:
    """Permutations of n elements with exactly k cycles."""
    _check(n, k)
    row = stirling1_row(n)
    return row[k] if k < len(row) else 0


def stirling2_row(n: int) -> list[int]:
    """Stirling numbers of the second kind S(n, 0..n)."""
    _check(n)
    inv_fact = [1] * (n + 1)
    fact = 1
    for i in range(1, n + 1):
        fact = fact * i % MOD
        inv_fact[i] = pow(fact, MOD - 2, MOD)
    signs = [(MOD - f) % MOD if i & 1 else f for i, f in enumerate(inv_fact)]
    powers = [pow(i, n, MOD) * f % MOD for i, f in enumerate(inv_fact)]
    return multiply(signs, powers)[: n + 1]