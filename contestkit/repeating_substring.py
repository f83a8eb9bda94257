"""Shortest block that repeats into a string with at most one mismatch."""

from math import isqrt


def divisors(n):
    """Return the positive divisors of ``n`` in ascending order."""
    found = set()
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            found.update((i, n // i))
    return sorted(found)


def mismatches_at_most_one(s, pattern):
    """Tell whether ``pattern`` repeated over ``s`` differs from it in at most one place."""
    k = len(pattern)
    mismatches = sum(1 for i, ch in enumerate(s) if ch != pattern[i % k])
    return mismatches < 2


def shortest_nearly_repeating(s):
    """Return the least length whose block, repeated, matches ``s`` but for one character."""
    n = len(s)
    if n == 0:
        raise ValueError("string must not be empty")
    for size in divisors(n)[:-1]:
        first = s[:size]
        second = s[size : 2 * size]
        if mismatches_at_most_one(s, first) or mismatches_at_most_one(s, second):
            return size
    return n


def run(text):
    """Answer each (length, string) query with the shortest length, one per line."""
    tokens = iter(text.split())
    out = []
    try:
        total = int(next(tokens))
        for _ in range(total):
            next(tokens)
            out.append(f"{shortest_nearly_repeating(next(tokens))}\n")
    except StopIteration:
        raise ValueError("input ended early") from None
    return "".join(out)