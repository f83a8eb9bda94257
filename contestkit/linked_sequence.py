"""A sequence of distinct values with constant-time insert-after and removal."""

_END = object()


class LinkedSequence:
    """Doubly linked sequence keyed by the values themselves, which must be distinct."""

    def __init__(self, values=()):
        self._next = {}
        self._prev = {}
        self._head = _END
        self._tail = _END
        for value in values:
            self._append(value)

    def _append(self, value):
        if value in self._next:
            raise ValueError(f"value {value!r} is already present")
        self._prev[value] = self._tail
        self._next[value] = _END
        if self._tail is _END:
            self._head = value
        else:
            self._next[self._tail] = value
        self._tail = value

    def insert_after(self, anchor, value):
        """Place ``value`` directly after ``anchor``."""
        if anchor not in self._next:
            raise KeyError(anchor)
        if value in self._next:
            raise ValueError(f"value {value!r} is already present")
        after = self._next[anchor]
        self._next[anchor] = value
        self._prev[value] = anchor
        self._next[value] = after
        if after is _END:
            self._tail = value
        else:
            self._prev[after] = value

    def remove(self, value):
        """Take ``value`` out of the sequence."""
        if value not in self._next:
            raise KeyError(value)
        before = self._prev.pop(value)
        after = self._next.pop(value)
        if before is _END:
            self._head = after
        else:
            self._next[before] = after
        if after is _END:
            self._tail = before
        else:
            self._prev[after] = before

    def __iter__(self):
        node = self._head
        while node is not _END:
            yield node
            node = self._next[node]

    def __len__(self):
        return len(self._next)

    def __contains__(self, value):
        return value in self._next


def run(text):
    """Read a sequence and queries (``1 a b`` insert, ``2 x`` erase); print the result."""
    numbers = iter(map(int, text.split()))
    try:
        n = next(numbers)
        sequence = LinkedSequence([next(numbers) for _ in range(n)])
        for _ in range(next(numbers)):
            kind = next(numbers)
            if kind == 2:
                sequence.remove(next(numbers))
            else:
                anchor = next(numbers)
                sequence.insert_after(anchor, next(numbers))
    except StopIteration:
        raise ValueError("input ended early") from None
    return "".join(f"{v} " for v in sequence)