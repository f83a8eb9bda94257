"""Shortest route lengths by Dijkstra's algorithm."""

import heapq

UNREACHABLE = 10**18


def _check(node_count, edges):
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    edges = list(edges)
    for a, b, weight in edges:
        if not (1 <= a <= node_count and 1 <= b <= node_count):
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{node_count}")
        if weight < 0:
            raise ValueError("edge weights must not be negative")
    return edges


def _dijkstra(adjacency, source):
    dist = {source: 0}
    queue = [(0, source)]
    while queue:
        d, node = heapq.heappop(queue)
        if d != dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist.get(neighbour, UNREACHABLE):
                dist[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return {node: dist.get(node) for node in adjacency}


def shortest_distances(node_count, edges, source):
    """Return ``{node: distance}`` from ``source`` over directed ``(from, to, weight)`` edges.

    Unreachable nodes map to None.
    """
    edges = _check(node_count, edges)
    if not 1 <= source <= node_count:
        raise ValueError(f"source {source} is outside 1..{node_count}")
    adjacency = {node: [] for node in range(1, node_count + 1)}
    for a, b, weight in edges:
        adjacency[a].append((b, weight))
    return _dijkstra(adjacency, source)


def all_pairs_distances(node_count, edges):
    """Return ``{source: {node: distance}}`` over undirected ``(a, b, weight)`` edges.

    Unreachable nodes map to None.
    """
    edges = _check(node_count, edges)
    adjacency = {node: [] for node in range(1, node_count + 1)}
    for a, b, weight in edges:
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))
    return {source: _dijkstra(adjacency, source) for source in adjacency}


def run_single(text):
    """Read ``n m`` and directed edges; print distances from node 1, space separated."""
    numbers = iter(map(int, text.split()))
    try:
        n, m = next(numbers), next(numbers)
        edges = [(next(numbers), next(numbers), next(numbers)) for _ in range(m)]
    except StopIteration:
        raise ValueError("input ended early") from None
    dist = shortest_distances(n, edges, 1)
    return "".join(
        f"{UNREACHABLE if d is None else d} " for d in dist.values()
    )


def run_pairs(text):
    """Read ``n m q``, undirected edges and queries; print each distance or -1."""
    numbers = iter(map(int, text.split()))
    try:
        n, m, q = next(numbers), next(numbers), next(numbers)
        edges = [(next(numbers), next(numbers), next(numbers)) for _ in range(m)]
        queries = [(next(numbers), next(numbers)) for _ in range(q)]
    except StopIteration:
        raise ValueError("input ended early") from None
    table = all_pairs_distances(n, edges)
    out = []
    for a, b in queries:
        if a not in table or b not in table:
            raise ValueError(f"query ({a}, {b}) names a node outside 1..{n}")
        d = table[a][b]
        out.append(f"{-1 if d is None else d}\n")
    return "".join(out)