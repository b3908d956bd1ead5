"""Prefix function, KMP automaton, Manacher and minimal rotation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple


def prefix_function(s: Sequence) -> list[int]:
    """``pi[i]`` is the length of the longest proper border of ``s[:i+1]``."""
    pi = [0] * len(s)
    k = 0
    for i in range(1, len(s)):
        while k and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def prefix_automaton(s: str, alphabet: str) -> list[dict[str, int]]:
    """KMP transition table for states 0..len(s).

    ``table[k][c]`` is the matched length after reading ``c`` with ``k``
    characters of ``s`` matched.
    """
    n = len(s)
    pi = prefix_function(s)
    table: list[dict[str, int]] = []
    for k in range(n + 1):
        row = {}
        for c in alphabet:
            if k < n and c == s[k]:
                row[c] = k + 1
            elif k == 0:
                row[c] = 0
            else:
                row[c] = table[pi[k - 1]][c]
        table.append(row)
    return table


def prefix_occurrences(pi: Sequence[int]) -> list[int]:
    """Occurrence counts of every prefix, indexed by prefix length (1..n)."""
    n = len(pi)
    counts = [0] * (n + 1)
    for value in pi:
        counts[value] += 1
    for length in range(n, 0, -1):
        counts[pi[length - 1]] += counts[length]
        counts[length] += 1
    return counts


class Palindromes(NamedTuple):
    """Palindrome radii per centre.

    ``odd[i] = k``: ``s[i-k : i+k+1]`` is the longest odd palindrome at ``i``.
    ``even[i] = k``: ``s[i-k+1 : i+k+1]`` is the longest even one at ``i, i+1``.
    """

    odd: list[int]
    even: list[int]


def manacher(s: Sequence) -> Palindromes:
    n = len(s)
    result = []
    for odd in (0, 1):
        pal = [0] * n
        left = right = -1
        for i in range(n):
            if i > right:
                left = right = i
            else:
                k = min(right - i, pal[left + right - i]) if right > i else 0
                left, right = i - k, i + k
            while left - odd >= 0 and right + 1 < n and s[left - odd] == s[right + 1]:
                left -= 1
                right += 1
            pal[i] = right - i
        result.append(pal)
    return Palindromes(odd=result[1], even=result[0])


def min_rotation(s: Sequence) -> int:
    """Start index of the lexicographically smallest rotation of ``s``."""
    n = len(s)
    doubled = list(s) * 2
    a = b = 0
    while b < n:
        for k in range(n):
            if a + k == b or doubled[a + k] < doubled[b + k]:
                b += max(0, k - 1)
                break
            if doubled[a + k] > doubled[b + k]:
                a = b
                break
        b += 1
    return a