"""Decide whether a number is a product of binary decimals.

A binary decimal is a number greater than one whose decimal digits are all
0 or 1, such as 10, 11 or 1001.
"""

from functools import lru_cache

LIMIT = 100_000


def binary_decimals(limit=LIMIT):
    """Return the binary decimals greater than 1 and at most ``limit``, ascending."""
    found = []
    k = 2
    while True:
        value = int(format(k, "b"))
        if value > limit:
            return found
        found.append(value)
        k += 1


@lru_cache(maxsize=None)
def _descending_factors():
    return tuple(sorted(binary_decimals(LIMIT), reverse=True))


def is_product_of_binary_decimals(n):
    """Tell whether ``n`` reduces to 1 by dividing out binary decimals, largest first."""
    for factor in _descending_factors():
        while n > 1 and n % factor == 0:
            n //= factor
    return n == 1


def run(text):
    """Answer each query of the input with YES or NO, one per line."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    count = int(tokens[0])
    queries = tokens[1 : 1 + count]
    if len(queries) < count:
        raise ValueError("input ended early")
    return "".join(
        "YES\n" if is_product_of_binary_decimals(int(q)) else "NO\n" for q in queries
    )