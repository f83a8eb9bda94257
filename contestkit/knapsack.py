"""Knapsack with large weights: maximise value by tracking least weight per value."""

MAX_TOTAL_VALUE = 100 * 1001


def max_value(items, capacity):
    """Return the largest positive total value of items fitting in ``capacity``.

    ``items`` holds ``(weight, value)`` pairs. Only totals up to
    ``MAX_TOTAL_VALUE`` are considered; -1 is returned when no selection with
    a positive total value fits.
    """
    items = list(items)
    limit = min(sum(value for _, value in items), MAX_TOTAL_VALUE)
    unreachable = float("inf")
    lightest = [0] + [unreachable] * limit
    for weight, value in items:
        if value < 0:
            raise ValueError("values must not be negative")
        for total in range(limit, value - 1, -1):
            candidate = lightest[total - value] + weight
            if candidate < lightest[total]:
                lightest[total] = candidate
    return max(
        (total for total in range(1, limit + 1) if lightest[total] <= capacity),
        default=-1,
    )


def run(text):
    """Read ``n W`` and ``n`` weight/value pairs; print the best value."""
    numbers = iter(map(int, text.split()))
    try:
        n, capacity = next(numbers), next(numbers)
        items = [(next(numbers), next(numbers)) for _ in range(n)]
    except StopIteration:
        raise ValueError("input ended early") from None
    return f"{max_value(items, capacity)}"