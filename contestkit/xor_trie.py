"""A multiset of 30-bit integers answering largest-XOR queries."""

BITS = 30


class _Node:
    __slots__ = ("children", "count")

    def __init__(self):
        self.children = [None, None]
        self.count = 0


def _bits(value):
    if not 0 <= value < 1 << BITS:
        raise ValueError(f"value {value} is outside 0..{(1 << BITS) - 1}")
    return [(value >> shift) & 1 for shift in range(BITS - 1, -1, -1)]


class XorTrie:
    """Binary trie over 30-bit values, most significant bit first, with counts."""

    def __init__(self):
        self._root = _Node()

    def __len__(self):
        return self._root.count

    def __contains__(self, value):
        node = self._root
        for bit in _bits(value):
            node = node.children[bit]
            if node is None:
                return False
        return True

    def add(self, value):
        """Add one copy of ``value``."""
        bits = _bits(value)
        node = self._root
        node.count += 1
        for bit in bits:
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _Node()
            child.count += 1
            node = child

    def remove(self, value):
        """Remove one copy of ``value``; raise KeyError if it is absent."""
        if value not in self:
            raise KeyError(value)
        node = self._root
        node.count -= 1
        for bit in _bits(value):
            child = node.children[bit]
            child.count -= 1
            if child.count == 0:
                node.children[bit] = None
                break
            node = child

    def max_xor(self, value):
        """Return the largest ``value ^ v`` over stored ``v``; 0 when the trie is empty."""
        node = self._root
        result = 0
        for shift, bit in zip(range(BITS - 1, -1, -1), _bits(value)):
            opposite = node.children[bit ^ 1]
            if opposite is not None:
                result |= 1 << shift
                node = opposite
            elif node.children[bit] is not None:
                node = node.children[bit]
        return result


def run(text):
    """Apply ``+ x``, ``- x`` and ``? x`` operations; print each query's answer."""
    tokens = iter(text.split())
    trie = XorTrie()
    out = []
    try:
        total = int(next(tokens))
        for _ in range(total):
            op = next(tokens)
            value = int(next(tokens))
            if op == "+":
                trie.add(value)
            elif op == "-":
                trie.remove(value)
            elif op == "?":
                out.append(f"{trie.max_xor(value)}\n")
            else:
                raise ValueError(f"unknown operation {op!r}")
    except StopIteration:
        raise ValueError("input ended early") from None
    return "".join(out)