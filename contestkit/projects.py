"""Choose non-overlapping projects for the largest total reward."""

from bisect import bisect_right


def max_reward(projects):
    """Return the best total reward of ``(start, end, reward)`` projects that do not overlap.

    Two projects overlap when one starts on or before the day the other ends.
    """
    ordered = sorted(projects, key=lambda p: p[0])
    if any(reward < 0 for _, _, reward in ordered):
        raise ValueError("rewards must not be negative")
    starts = [start for start, _, _ in ordered]
    n = len(ordered)
    best = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        _, end, reward = ordered[i]
        following = bisect_right(starts, end, lo=i + 1)
        best[i] = max(best[i + 1], reward + best[following])
    return best[0]


def run(text):
    """Read ``n`` and ``n`` start/end/reward triples; print the best reward."""
    numbers = iter(map(int, text.split()))
    try:
        n = next(numbers)
        projects = [(next(numbers), next(numbers), next(numbers)) for _ in range(n)]
    except StopIteration:
        raise ValueError("input ended early") from None
    return f"{max_reward(projects)}\n"