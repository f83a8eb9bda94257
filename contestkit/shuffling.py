"""Lowest set bit of an integer."""


def lowest_set_bit(n):
    """Return the value of the lowest set bit of ``n`` (0 when ``n`` is 0)."""
    return n & -n


def run(text):
    """Answer each query with its lowest set bit, one per line."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    count = int(tokens[0])
    queries = tokens[1 : 1 + count]
    if len(queries) < count:
        raise ValueError("input ended early")
    return "".join(f"{lowest_set_bit(int(q))}\n" for q in queries)