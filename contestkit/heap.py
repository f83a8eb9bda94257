"""Array-backed binary min-heap with deletion at an arbitrary position."""


def _parent(i):
    return (i - 1) // 2


class MinHeap:
    """Min-heap built from an iterable, supporting push, pop, peek and delete_at."""

    def __init__(self, values=()):
        self._items = list(values)
        for i in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(i)

    def __len__(self):
        return len(self._items)

    def _sift_up(self, i):
        items = self._items
        while i > 0:
            parent = _parent(i)
            if items[parent] <= items[i]:
                break
            items[parent], items[i] = items[i], items[parent]
            i = parent

    def _sift_down(self, i):
        items = self._items
        size = len(items)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest

    def push(self, value):
        """Insert ``value``."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def peek(self):
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def pop(self):
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return self.delete_at(0)

    def delete_at(self, index):
        """Remove and return the value stored at array position ``index``."""
        items = self._items
        if not 0 <= index < len(items):
            raise IndexError(f"index {index} is outside the heap")
        items[index], items[-1] = items[-1], items[index]
        removed = items.pop()
        if index < len(items):
            if index > 0 and items[index] < items[_parent(index)]:
                self._sift_up(index)
            else:
                self._sift_down(index)
        return removed