"""Count the ordered ways to reach a sum with throws of a six-sided die."""

MODULUS = 1_000_000_007
FACES = 6


def dice_combinations(n):
    """Return the number of ordered dice sequences summing to ``n``, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1]
    for total in range(1, n + 1):
        window = ways[max(0, total - FACES) : total]
        ways.append(sum(window) % MODULUS)
    return ways[n]


def run(text):
    """Read ``n`` and print its number of dice combinations."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    return f"{dice_combinations(int(tokens[0]))}\n"