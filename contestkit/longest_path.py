"""Longest path, counted in edges, in a directed graph."""


def _adjacency(node_count, edges):
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    adjacency = {node: [] for node in range(1, node_count + 1)}
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{node_count}")
        adjacency[a].append(b)
    return adjacency


def longest_path(node_count, edges):
    """Return the number of edges on the longest path of a directed acyclic graph.

    Nodes are numbered from 1 to ``node_count``; ``edges`` holds ``(from, to)``
    pairs. A node met again while its own search is still open counts as
    depth zero, so a cycle does not loop forever. An empty graph gives -1.
    """
    adjacency = _adjacency(node_count, edges)
    depth = {}
    best_below = {}
    for start in adjacency:
        if start in best_below:
            continue
        best_below[start] = 0
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child in best_below:
                    best_below[node] = max(best_below[node], depth.get(child, 0))
                else:
                    best_below[child] = 0
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                stack.pop()
                depth[node] = 1 + best_below[node]
                if stack:
                    parent = stack[-1][0]
                    best_below[parent] = max(best_below[parent], depth[node])
    return max(depth.values(), default=0) - 1


def run(text):
    """Read ``n m`` and ``m`` directed edges; print the longest path length."""
    numbers = iter(map(int, text.split()))
    try:
        n, m = next(numbers), next(numbers)
        edges = [(next(numbers), next(numbers)) for _ in range(m)]
    except StopIteration:
        raise ValueError("input ended early") from None
    return f"{longest_path(n, edges)}"