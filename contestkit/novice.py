"""Find the (a, b) pairs for which a string-based calculation happens to be right.

The number ``n`` written as a string is repeated ``a`` times and ``b``
characters are cut from its end; the pair counts when the remaining digits
read as a number equal ``n * a - b``.
"""

MAX_REPEATS = 10_000
_MAX_DIGITS = 11

_ZERO_ANSWER = frozenset(
    {6, 8, 9, 12, 15, 17, 19, 22, 23}
    | set(range(25, 35))
    | set(range(36, 68))
    | set(range(69, 89))
    | {91, 92, 93}
    | set(range(95, 101))
)


def novice_pairs(n):
    """Return the pairs ``(a, b)`` for ``n``, ordered by ``a`` then ``b``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n in _ZERO_ANSWER:
        return []
    digits = str(n)
    width = len(digits)
    repeated = digits * (_MAX_DIGITS // width + 1)
    prefixes = [int(repeated[:i]) for i in range(1, _MAX_DIGITS + 1)]

    pairs = []
    for a in range(1, MAX_REPEATS + 1):
        total = width * a
        target = n * a
        for kept in range(min(_MAX_DIGITS, total), 0, -1):
            cut = total - kept
            if cut == 0:
                continue
            value = prefixes[kept - 1]
            if value != 0 and value == target - cut:
                pairs.append((a, cut))
    return pairs


def run(text):
    """For each query print the pair count followed by the pairs."""
    tokens = text.split()
    if not tokens:
        raise ValueError("input is empty")
    total = int(tokens[0])
    queries = tokens[1 : 1 + total]
    if len(queries) < total:
        raise ValueError("input ended early")
    out = []
    for q in queries:
        pairs = novice_pairs(int(q))
        out.append(f"{len(pairs)}\n")
        out.extend(f"{a} {b}\n" for a, b in pairs)
    return "".join(out)