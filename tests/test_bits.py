import pytest

from contestlib.bits import (
    gray_code,
    inverse_gray_code,
    next_bit_permutation,
    next_combination_mask,
    next_same_popcount,
    prev_same_popcount,
    splitmix64,
    submasks,
)


def _with_popcount(k, limit):
    return [x for x in range(limit) if bin(x).count("1") == k]


def test_gray_code_first_values():
    assert [gray_code(i) for i in range(4)] == [0b000, 0b001, 0b011, 0b010]


def test_gray_code_properties():
    for i in range(200):
        assert inverse_gray_code(gray_code(i)) == i
        assert bin(gray_code(i) ^ gray_code(i + 1)).count("1") == 1


def test_bit_permutation_sequence_from_source():
    seq = [0b00111]
    for _ in range(5):
        seq.append(next_bit_permutation(seq[-1]))
    assert seq == [0b00111, 0b01011, 0b01101, 0b01110, 0b10011, 0b10101]


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_successors_enumerate_same_popcount(k):
    values = _with_popcount(k, 256)
    for a, b in zip(values, values[1:]):
        assert next_same_popcount(a) == b
        assert next_bit_permutation(a) == b
        assert next_combination_mask(a) == b
        assert prev_same_popcount(b) == a


def test_prev_same_popcount_failures():
    for n in (0, 1, 0b111, 0b1111):
        with pytest.raises(ValueError):
            prev_same_popcount(n)


def test_next_same_popcount_zero():
    with pytest.raises(ValueError):
        next_same_popcount(0)


def test_submasks_in_decreasing_order():
    mask = 0b101101
    expected = sorted((s for s in range(1, mask + 1) if s & mask == s), reverse=True)
    assert list(submasks(mask)) == expected
    assert list(submasks(0)) == []


def test_splitmix64():
    assert splitmix64(0) == 0xE220A8397B1DCDAF
    assert all(0 <= splitmix64(x) < 1 << 64 for x in range(50))