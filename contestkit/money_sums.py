"""All distinct sums formed by subsets of coins."""

MAX_COIN = 1000


def money_sums(coins):
    """Return the distinct positive subset sums of ``coins`` in ascending order.

    Sums are tracked up to ``len(coins) * MAX_COIN``.
    """
    coins = list(coins)
    if any(c < 0 for c in coins):
        raise ValueError("coin values must not be negative")
    limit = len(coins) * MAX_COIN
    mask = (1 << (limit + 1)) - 1
    reachable = 1
    for coin in coins:
        reachable |= (reachable << coin) & mask
    return [total for total in range(1, limit + 1) if reachable >> total & 1]


def run(text):
    """Read ``n`` and ``n`` coins; print the number of sums, then the sums."""
    numbers = list(map(int, text.split()))
    if not numbers:
        raise ValueError("input is empty")
    n = numbers[0]
    coins = numbers[1 : 1 + n]
    if len(coins) < n:
        raise ValueError("input ended early")
    sums = money_sums(coins)
    return f"{len(sums)}\n" + "".join(f"{s} " for s in sums)