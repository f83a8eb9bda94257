"""Fenwick (binary indexed) tree over 1-based positions."""


class FenwickTree:
    """Point additions and prefix sums in logarithmic time; positions run 1..size."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self):
        return self._size

    def add(self, index, delta):
        """Add ``delta`` at position ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} is outside 1..{self._size}")
        while index <= self._size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index):
        """Return the sum of positions 1..``index`` (0 for ``index`` 0)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is outside 0..{self._size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left, right):
        """Return the sum of positions ``left``..``right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)