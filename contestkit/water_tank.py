"""Per-position times for a row of water-tank partitions."""


def water_tank_times(heights):
    """Return, for each height, itself plus its excess over every earlier height, plus one."""
    heights = list(heights)
    return [
        h + sum(h - p for p in heights[:i] if h > p) + 1
        for i, h in enumerate(heights)
    ]


def run(text):
    """Read ``n`` and ``n`` heights; print the times separated by spaces."""
    numbers = list(map(int, text.split()))
    if not numbers:
        raise ValueError("input is empty")
    n = numbers[0]
    heights = numbers[1 : 1 + n]
    if len(heights) < n:
        raise ValueError("input ended early")
    return "".join(f"{t} " for t in water_tank_times(heights))