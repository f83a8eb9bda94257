"""Fewest straight cuts that split a rectangle into squares."""


def min_cuts(width, height):
    """Return the least number of cuts that divide a ``width`` by ``height`` rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("both sides must be positive")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for x in range(1, width + 1):
        for y in range(1, height + 1):
            if x == y:
                continue
            if x == 1:
                cuts[x][y] = y - 1
            elif y == 1:
                cuts[x][y] = x - 1
            else:
                across = min(
                    1 + cuts[i][y] + cuts[x - i][y] for i in range(1, x // 2 + 1)
                )
                along = min(
                    1 + cuts[x][i] + cuts[x][y - i] for i in range(1, y // 2 + 1)
                )
                cuts[x][y] = min(across, along)
    return cuts[width][height]


def run(text):
    """Read the two sides and print the least number of cuts."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("two sides are required")
    return f"{min_cuts(int(tokens[0]), int(tokens[1]))}\n"