import math

import pytest

from contestlib.stirling import MOD, stirling1, stirling1_row, stirling2, stirling2_row


def test_first_kind_row_of_eight():
    assert stirling1_row(8) == [0, 5040, 13068, 13132, 6769, 1960, 322, 28, 1]


def test_first_kind_k_two():
    assert [stirling1(n, 2) for n in range(10)] == [0, 0, 1, 3, 11, 50, 274, 1764, 13068, 109584]


@pytest.mark.parametrize("n", range(0, 12))
def test_first_kind_row_sums_to_factorial(n):
    assert sum(stirling1_row(n)) % MOD == math.factorial(n) % MOD


def test_first_kind_beyond_n():
    assert stirling1(4, 9) == 0


@pytest.mark.parametrize("n", range(1, 12))
def test_second_kind_edges(n):
    assert stirling2(n, 1) == 1
    assert stirling2(n, n) == 1
    assert stirling2(n, n + 1) == 0


def test_second_kind_recurrence():
    for n in range(2, 12):
        for k in range(1, n + 1):
            assert stirling2(n, k) == (k * stirling2(n - 1, k) + stirling2(n - 1, k - 1)) % MOD


def test_second_kind_parity():
    for n in range(1, 12):
        for k in range(1, n + 1):
            assert (stirling2(n, k) % 2 == 1) == (((n - k) & ((k - 1) // 2)) == 0)


@pytest.mark.parametrize("n", [0, 1, 5, 10])
def test_second_kind_row_matches_single(n):
    assert stirling2_row(n) == [stirling2(n, k) for k in range(n + 1)]


def test_negative_rejected():
    with pytest.raises(ValueError):
        stirling2(-1, 2)