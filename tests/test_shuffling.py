import pytest
from hypothesis import given, strategies as st

from contestkit.shuffling import lowest_set_bit, run


def test_zero():
    assert lowest_set_bit(0) == 0


@given(st.integers(min_value=1, max_value=10**12))
def test_result_is_power_of_two_dividing_n(n):
    bit = lowest_set_bit(n)
    assert bit & (bit - 1) == 0
    assert n % bit == 0
    assert (n // bit) % 2 == 1


@given(st.integers(min_value=0, max_value=40))
def test_powers_of_two_are_fixed_points(k):
    assert lowest_set_bit(2**k) == 2**k


def test_run():
    assert run("2\n12\n7\n") == "4\n1\n"


def test_run_truncated():
    with pytest.raises(ValueError):
        run("2\n12\n")