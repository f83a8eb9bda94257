import pytest
from hypothesis import given, strategies as st

from contestkit.repeating_substring import (
    divisors,
    mismatches_at_most_one,
    run,
    shortest_nearly_repeating,
)


@given(st.integers(min_value=1, max_value=10**6))
def test_divisors_invariants(n):
    found = divisors(n)
    assert found == sorted(set(found))
    assert found[0] == 1 and found[-1] == n
    assert all(n % d == 0 for d in found)
    assert all(d * (n // d) == n and n // d in found for d in found)


def test_mismatch_check():
    assert mismatches_at_most_one("abcabd", "abc") is True
    assert mismatches_at_most_one("abdabd", "abc") is False
    assert mismatches_at_most_one("abcabc", "abc") is True


def test_single_character():
    assert shortest_nearly_repeating("c") == 1


def test_empty_rejected():
    with pytest.raises(ValueError):
        shortest_nearly_repeating("")


@given(st.text(alphabet="ab", min_size=1, max_size=4), st.integers(min_value=1, max_value=6))
def test_repeated_block_bounds_answer(block, times):
    s = block * times
    answer = shortest_nearly_repeating(s)
    assert answer <= len(block)
    assert len(s) % answer == 0


@given(st.text(alphabet="abc", min_size=1, max_size=30))
def test_answer_is_valid_block(s):
    answer = shortest_nearly_repeating(s)
    assert len(s) % answer == 0
    assert answer == len(s) or mismatches_at_most_one(s, s[:answer]) or mismatches_at_most_one(
        s, s[answer : 2 * answer]
    )


def test_run():
    assert run("2\n1\nc\n6\nababab\n") == "1\n2\n"


def test_run_truncated():
    with pytest.raises(ValueError):
        run("2\n1\nc\n")