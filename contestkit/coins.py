"""Fewest coins that add up to a target sum."""

from collections import deque


def min_coins(coins, target):
    """Return the fewest coins summing to ``target`` with unlimited reuse, or -1."""
    if target < 0:
        raise ValueError("target must not be negative")
    coins = list(coins)
    if any(c < 0 for c in coins):
        raise ValueError("coin values must not be negative")
    steps = {0: 0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for coin in coins:
            total = current + coin
            if total <= target and total not in steps:
                steps[total] = steps[current] + 1
                queue.append(total)
    return steps.get(target, -1)


def run(text):
    """Read ``n x`` and ``n`` coin values; print the fewest coins or -1."""
    numbers = list(map(int, text.split()))
    if len(numbers) < 2:
        raise ValueError("input ended early")
    n, target = numbers[0], numbers[1]
    coins = numbers[2 : 2 + n]
    if len(coins) < n:
        raise ValueError("input ended early")
    return f"{min_coins(coins, target)}\n"