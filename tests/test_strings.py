import random

import pytest

from contestlib.strings import (
    manacher,
    min_rotation,
    prefix_automaton,
    prefix_function,
    prefix_occurrences,
)


def _border(t):
    for k in range(len(t) - 1, 0, -1):
        if t[:k] == t[-k:]:
            return k
    return 0


def _count_overlapping(text, pattern):
    return sum(1 for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i))


def _random_words(seed, count=15):
    rng = random.Random(seed)
    return ["".join(rng.choice("ab") for _ in range(rng.randrange(1, 14))) for _ in range(count)]


@pytest.mark.parametrize("s", ["abacaba", "aaaa", "abcd", ""] + _random_words(1))
def test_prefix_function_is_longest_border(s):
    assert prefix_function(s) == [_border(s[: i + 1]) for i in range(len(s))]


@pytest.mark.parametrize("s", _random_words(2))
def test_prefix_occurrences(s):
    counts = prefix_occurrences(prefix_function(s))
    assert len(counts) == len(s) + 1
    for length in range(1, len(s) + 1):
        assert counts[length] == _count_overlapping(s, s[:length])


@pytest.mark.parametrize("pattern", ["aba", "aa", "b", "abab"])
def test_automaton_finds_all_matches(pattern):
    table = prefix_automaton(pattern, "ab")
    assert len(table) == len(pattern) + 1
    for text in _random_words(3, 10):
        state = 0
        found = 0
        for c in text:
            state = table[state][c]
            found += state == len(pattern)
        assert found == _count_overlapping(text, pattern)


@pytest.mark.parametrize("s", ["abacaba", "abba", "a", "", "aaaa"] + _random_words(4))
def test_manacher_radii_are_maximal(s):
    pal = manacher(s)
    n = len(s)
    assert len(pal.odd) == len(pal.even) == n
    for i in range(n):
        k = pal.odd[i]
        sub = s[i - k : i + k + 1]
        assert sub == sub[::-1]
        assert i - k - 1 < 0 or i + k + 1 >= n or s[i - k - 1] != s[i + k + 1]
        k = pal.even[i]
        sub = s[i - k + 1 : i + k + 1]
        assert sub == sub[::-1]
        assert i - k < 0 or i + k + 1 >= n or s[i - k] != s[i + k + 1]


@pytest.mark.parametrize("s", ["bca", "baaa", "abab", "cabcab", "z"] + _random_words(5))
def test_min_rotation_is_smallest(s):
    i = min_rotation(s)
    assert 0 <= i < len(s)
    rotations = [s[j:] + s[:j] for j in range(len(s))]
    assert s[i:] + s[:i] == min(rotations)


def test_min_rotation_empty():
    assert min_rotation("") == 0