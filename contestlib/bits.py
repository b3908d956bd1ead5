"""Bit manipulation helpers."""

from __future__ import annotations

from collections.abc import Iterator

_MASK64 = (1 << 64) - 1


def gray_code(n: int) -> int:
    return n ^ (n >> 1)


def inverse_gray_code(g: int) -> int:
    n = 0
    while g:
        n ^= g
        g >>= 1
    return n


def next_same_popcount(n: int) -> int:
    """Smallest integer greater than ``n`` with the same number of set bits."""
    if n <= 0:
        raise ValueError("n must be positive")
    lowest = n & -n
    left = lowest + n
    right = ((n ^ left) // lowest) >> 2
    return left | right


def prev_same_popcount(n: int) -> int:
    """Largest integer smaller than ``n`` with the same number of set bits."""
    if n < 0 or n & (n + 1) == 0:
        raise ValueError(f"no smaller number with the popcount of {n}")
    mask = (1 << n.bit_length()) - 1
    return ~next_same_popcount(~n & mask) & mask


def next_bit_permutation(v: int) -> int:
    """Next bit permutation: 0b00111, 0b01011, 0b01101, ..."""
    if v <= 0:
        raise ValueError("v must be positive")
    t = v | (v - 1)
    trailing = (v & -v).bit_length() - 1
    return (t + 1) | (((~t & (t + 1)) - 1) >> (trailing + 1))


def next_combination_mask(mask: int) -> int:
    if mask <= 0:
        raise ValueError("mask must be positive")
    lowest = mask & -mask
    return (((mask + lowest) ^ mask) // (lowest << 2)) | (mask + lowest)


def submasks(mask: int) -> Iterator[int]:
    """Non-empty submasks of ``mask`` in decreasing order."""
    if mask < 0:
        raise ValueError("mask must be non-negative")
    s = mask
    while s > 0:
        yield s
        s = (s - 1) & mask


def splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)