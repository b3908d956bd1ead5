import operator
import random

import pytest

from contestlib.fwht import MOD, Convolution, convolve, fwht

_OPS = {Convolution.AND: operator.and_, Convolution.OR: operator.or_, Convolution.XOR: operator.xor}


def _by_definition(a, b, op):
    c = [0] * len(a)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            c[op(i, j)] = (c[op(i, j)] + x * y) % MOD
    return c


@pytest.mark.parametrize("kind", list(Convolution))
def test_round_trip(kind):
    rng = random.Random(int(kind))
    values = [rng.randrange(MOD) for _ in range(16)]
    assert fwht(fwht(values, False, kind), True, kind) == values


@pytest.mark.parametrize("kind", list(Convolution))
def test_convolution_definition(kind):
    rng = random.Random(10 + int(kind))
    a = [rng.randrange(50) for _ in range(8)]
    b = [rng.randrange(50) for _ in range(8)]
    assert convolve(a, b, kind) == _by_definition(a, b, _OPS[kind])


def test_xor_of_unit_vectors():
    a = [0] * 8
    b = [0] * 8
    a[5] = 1
    b[3] = 1
    expected = [0] * 8
    expected[5 ^ 3] = 1
    assert convolve(a, b, Convolution.XOR) == expected


def test_integer_kind_accepted():
    a, b = [1, 2, 3, 4], [4, 3, 2, 1]
    assert convolve(a, b, 1) == convolve(a, b, Convolution.OR)


def test_non_power_of_two_rejected():
    with pytest.raises(ValueError):
        fwht([1, 2, 3])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        convolve([1, 2], [1, 2, 3, 4])