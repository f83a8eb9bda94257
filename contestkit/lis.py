"""Length of the longest strictly increasing subsequence."""

from bisect import bisect_left


def longest_increasing_subsequence(values):
    """Return the length of the longest strictly increasing subsequence of ``values``."""
    tails = []
    for value in values:
        if not tails or tails[-1] < value:
            tails.append(value)
        else:
            tails[bisect_left(tails, value)] = value
    return len(tails)


def run(text):
    """Read ``n`` and ``n`` numbers; print the subsequence length."""
    numbers = list(map(int, text.split()))
    if not numbers:
        raise ValueError("input is empty")
    n = numbers[0]
    values = numbers[1 : 1 + n]
    if len(values) < n:
        raise ValueError("input ended early")
    return f"{longest_increasing_subsequence(values)}\n"