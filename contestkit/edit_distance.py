"""Levenshtein edit distance between two strings."""


def edit_distance(s, t):
    """Return the least number of insertions, deletions and replacements turning ``s`` into ``t``."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        current = [i]
        for j, b in enumerate(t, start=1):
            current.append(
                min(
                    previous[j - 1] + (a != b),
                    previous[j] + 1,
                    current[j - 1] + 1,
                )
            )
        previous = current
    return previous[-1]


def run(text):
    """Read two strings and print their edit distance."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("two strings are required")
    return f"{edit_distance(tokens[0], tokens[1])}"