"""Smallest product of the first two primes not below a bound."""

from itertools import count, islice


def is_prime(n):
    """Tell whether ``n`` is prime."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def smallest_two_prime_product(x):
    """Multiply the first two primes that are at least ``x``."""
    first, second = islice(filter(is_prime, count(x)), 2)
    return first * second


def run(text):
    """Answer each query with its two-prime product, one per line."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    total = int(tokens[0])
    queries = tokens[1 : 1 + total]
    if len(queries) < total:
        raise ValueError("input ended early")
    return "".join(f"{smallest_two_prime_product(int(q))}\n" for q in queries)