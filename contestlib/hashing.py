"""Polynomial string hashing with two bases modulo 1e9+7."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007
BASES = (127, 1_000_003)


def _codes(s: str | bytes | Iterable[int]) -> list[int]:
    if isinstance(s, str):
        return [ord(c) for c in s]
    return [int(x) for x in s]


def _powers(base: int, count: int) -> list[int]:
    out = [1] * count
    for i in range(1, count):
        out[i] = out[i - 1] * base % MOD
    return out


def _combine(first: int, second: int) -> int:
    return second << 31 | first


def string_hash(s: str | bytes | Iterable[int]) -> int:
    """Hash ``sum(s[i] * B**i)`` for both bases, packed into one integer."""
    parts = []
    for base in BASES:
        total = 0
        weight = 1
        for c in _codes(s):
            total = (total + weight * c) % MOD
            weight = weight * base % MOD
        parts.append(total)
    return _combine(*parts)


class RangeHash:
    """Prefix hashes of a string giving substring hashes in O(1)."""

    def __init__(self, s: str | bytes | Iterable[int], with_reverse: bool = False) -> None:
        codes = _codes(s)
        n = len(codes)
        self._n = n
        self._pow = [_powers(b, n + 2) for b in BASES]
        self._inv = [_powers(pow(b, -1, MOD), n + 2) for b in BASES]
        self._h = [self._prefix(codes, p) for p in self._pow]
        self._rev = [self._prefix(codes, inv) for inv in self._inv] if with_reverse else None

    @staticmethod
    def _prefix(codes: list[int], weights: list[int]) -> list[int]:
        out = [0] * (len(codes) + 1)
        for i, c in enumerate(codes):
            out[i + 1] = (out[i] + weights[i + 1] * c) % MOD
        return out

    def __len__(self) -> int:
        return self._n

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds for length {self._n}")

    def get(self, left: int, right: int) -> int:
        """Hash of ``s[left:right+1]``, equal to ``string_hash`` of it."""
        self._check(left, right)
        parts = [
            (h[right + 1] - h[left]) * inv[left + 1] % MOD
            for h, inv in zip(self._h, self._inv)
        ]
        return _combine(*parts)

    def get_reverse(self, left: int, right: int) -> int:
        """Hash of the reversed ``s[left:right+1]``."""
        if self._rev is None:
            raise ValueError("reverse hashes were not built")
        self._check(left, right)
        parts = [
            (r[right + 1] - r[left]) * p[right + 1] % MOD
            for r, p in zip(self._rev, self._pow)
        ]
        return _combine(*parts)


class HashSegmentTree:
    """Segment tree of weighted characters supporting point updates."""

    def __init__(self, values: str | bytes | Iterable[int]) -> None:
        codes = _codes(values)
        n = len(codes)
        self._n = n
        self._pow = [_powers(b, max(n, 1)) for b in BASES]
        self._inv = [_powers(pow(b, -1, MOD), max(n, 1)) for b in BASES]
        self._trees = []
        for weights in self._pow:
            tree = [0] * (2 * n)
            for i, c in enumerate(codes):
                tree[n + i] = c * weights[i] % MOD
            for i in range(n - 1, 0, -1):
                tree[i] = (tree[2 * i] + tree[2 * i + 1]) % MOD
            self._trees.append(tree)

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int | str) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of bounds for length {self._n}")
        code = ord(value) if isinstance(value, str) else int(value)
        for tree, weights in zip(self._trees, self._pow):
            i = index + self._n
            tree[i] = code * weights[index] % MOD
            i //= 2
            while i:
                tree[i] = (tree[2 * i] + tree[2 * i + 1]) % MOD
                i //= 2

    def query(self, left: int, right: int) -> int:
        """Hash of the values in ``[left, right]``, as ``string_hash`` gives it."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds for length {self._n}")
        parts = []
        for tree, inv in zip(self._trees, self._inv):
            lo, hi = left + self._n, right + self._n + 1
            total = 0
            while lo < hi:
                if lo & 1:
                    total += tree[lo]
                    lo += 1
                if hi & 1:
                    hi -= 1
                    total += tree[hi]
                lo //= 2
                hi //= 2
            parts.append(total % MOD * inv[left] % MOD)
        return _combine(*parts)