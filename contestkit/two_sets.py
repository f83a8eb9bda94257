"""Count the ways to split 1..n into two sets of equal sum."""

MODULUS = 1_000_000_007


def count_equal_partitions(n):
    """Return the number of equal-sum splits of ``1..n`` into two sets, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for k in range(1, n + 1):
        for s in range(half, k - 1, -1):
            ways[s] = (ways[s] + ways[s - k]) % MODULUS
    inverse_two = pow(2, MODULUS - 2, MODULUS)
    return ways[half] * inverse_two % MODULUS


def run(text):
    """Read ``n`` and print its number of equal-sum splits."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    return f"{count_equal_partitions(int(tokens[0]))}\n"