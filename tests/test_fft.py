import random

import pytest

from contestlib import ntt
from contestlib.fft import MOD, multiply, multiply_mod


def test_small_product():
    assert multiply([1, 1], [1, 1]) == [1, 2, 1]


def test_negative_coefficients():
    assert multiply([1, -1], [1, 1]) == [1, 0, -1]


def test_empty_input():
    assert multiply([], [1, 2]) == []


@pytest.mark.parametrize("seed", range(5))
def test_agrees_with_ntt(seed):
    rng = random.Random(seed)
    a = [rng.randrange(1000) for _ in range(rng.randrange(1, 40))]
    b = [rng.randrange(1000) for _ in range(rng.randrange(1, 40))]
    assert multiply(a, b) == ntt.multiply(a, b)


def test_sum_of_product_is_product_of_sums():
    a = [3, 1, 4, 1, 5, 9, 2, 6]
    b = [2, 7, 1, 8, 2, 8]
    c = multiply(a, b)
    assert len(c) == len(a) + len(b) - 1
    assert sum(c) == sum(a) * sum(b)


def test_multiply_mod_matches_plain_for_small_values():
    rng = random.Random(7)
    a = [rng.randrange(100) for _ in range(30)]
    b = [rng.randrange(100) for _ in range(17)]
    assert multiply_mod(a, b) == [x % MOD for x in multiply(a, b)]


def test_multiply_mod_large_values_invariants():
    rng = random.Random(11)
    a = [rng.randrange(MOD) for _ in range(50)]
    b = [rng.randrange(MOD) for _ in range(40)]
    c = multiply_mod(a, b)
    assert len(c) == 89
    assert sum(c) % MOD == sum(a) * sum(b) % MOD
    assert c[0] == a[0] * b[0] % MOD
    assert c[-1] == a[-1] * b[-1] % MOD
    assert multiply_mod(b, a) == c