"""Split a row of cards into segments in which no subset multiplies to ``x``."""


def min_segments(values, x):
    """Return the number of segments a greedy left-to-right split produces."""
    products = {1}
    segments = 1
    for value in values:
        if x % value != 0:
            continue
        products = {p * value for p in products if p * value <= x}
        if x in products:
            segments += 1
            products = {1, value}
    return segments


def run(text):
    """Answer each (n x, values) query with its segment count, one per line."""
    numbers = iter(map(int, text.split()))
    out = []
    try:
        total = next(numbers)
        for _ in range(total):
            n, x = next(numbers), next(numbers)
            values = [next(numbers) for _ in range(n)]
            out.append(f"{min_segments(values, x)}\n")
    except StopIteration:
        raise ValueError("input ended early") from None
    return "".join(out)