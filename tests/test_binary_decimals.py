import pytest
from hypothesis import given, strategies as st

from contestkit.binary_decimals import (
    LIMIT,
    binary_decimals,
    is_product_of_binary_decimals,
    run,
)


def test_small_limit_listing():
    assert binary_decimals(100) == [10, 11, 100]


def test_default_listing_invariants():
    values = binary_decimals()
    assert values == sorted(values)
    assert values[-1] == LIMIT
    assert all(set(str(v)) <= {"0", "1"} for v in values)
    assert all(v > 1 for v in values)


def test_one_is_accepted():
    assert is_product_of_binary_decimals(1) is True


@pytest.mark.parametrize("n", [2, 3, 7, 99])
def test_numbers_without_binary_factors_rejected(n):
    assert is_product_of_binary_decimals(n) is False


@given(st.sampled_from(binary_decimals()))
def test_every_binary_decimal_is_accepted(n):
    assert is_product_of_binary_decimals(n) is True


def test_non_positive_rejected():
    assert is_product_of_binary_decimals(0) is False
    assert is_product_of_binary_decimals(-10) is False


def test_run_formats_answers():
    assert run("3\n1\n7\n10\n") == "YES\nNO\nYES\n"


def test_run_truncated_input():
    with pytest.raises(ValueError):
        run("3\n1\n")