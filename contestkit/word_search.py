"""Search a grid of letters for a word along adjacent cells."""

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def word_exists(board, word):
    """Tell whether ``word`` can be traced through edge-adjacent cells, each used once."""
    grid = [list(row) for row in board]
    if not word:
        return True
    rows = len(grid)
    visited = set()

    def inside(x, y):
        return 0 <= x < rows and 0 <= y < len(grid[x])

    def trace(index, x, y):
        if grid[x][y] != word[index]:
            return False
        if index == len(word) - 1:
            return True
        visited.add((x, y))
        try:
            return any(
                trace(index + 1, x + dx, y + dy)
                for dx, dy in _STEPS
                if inside(x + dx, y + dy) and (x + dx, y + dy) not in visited
            )
        finally:
            visited.discard((x, y))

    return any(
        trace(0, x, y) for x in range(rows) for y in range(len(grid[x]))
    )