"""Two players take numbers from either end of a row; best score for the first."""

from itertools import accumulate


def max_first_player_score(values):
    """Return the largest total the first player can secure when both play optimally."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    prefix = list(accumulate(values, initial=0))
    best = values[:]
    n = len(values)
    for length in range(2, n + 1):
        best = [
            prefix[i + length] - prefix[i] - min(best[i], best[i + 1])
            for i in range(n - length + 1)
        ]
    return best[0]


def run(text):
    """Read ``n`` and ``n`` numbers; print the first player's best score."""
    numbers = list(map(int, text.split()))
    if not numbers:
        raise ValueError("input is empty")
    n = numbers[0]
    values = numbers[1 : 1 + n]
    if len(values) < n:
        raise ValueError("input ended early")
    return f"{max_first_player_score(values)}\n"