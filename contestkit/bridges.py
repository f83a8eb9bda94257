"""Bridges found by depth-first search from node 1 of an undirected graph."""


def find_bridges(node_count, edges):
    """Return the bridges reachable from node 1 as ``(child, parent)`` pairs.

    Pairs come in the order the search finishes the child's subtree; edges
    leading back to the search parent are never treated as back edges.
    """
    if node_count < 1:
        raise ValueError("the graph needs at least one node")
    adjacency = {node: [] for node in range(1, node_count + 1)}
    for a, b in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) names a node outside 1..{node_count}")
        adjacency[a].append(b)
        adjacency[b].append(a)

    entry = {1: 0}
    low = {1: 0}
    timer = 1
    bridges = []
    stack = [(1, None, iter(adjacency[1]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child == parent:
                continue
            if child in entry:
                low[node] = min(low[node], entry[child])
            else:
                entry[child] = low[child] = timer
                timer += 1
                stack.append((child, node, iter(adjacency[child])))
                break
        else:
            stack.pop()
            if stack:
                above = stack[-1][0]
                if low[node] > entry[above]:
                    bridges.append((node, above))
                low[above] = min(low[above], low[node])
    return bridges


def run(text):
    """Read test cases of ``n m`` and edges; print a line per bridge found."""
    numbers = iter(map(int, text.split()))
    out = []
    try:
        total = next(numbers)
        for _ in range(total):
            n, m = next(numbers), next(numbers)
            edges = [(next(numbers), next(numbers)) for _ in range(m)]
            out.extend(f"{c} {p} form bridge\n" for c, p in find_bridges(n, edges))
    except StopIteration:
        raise ValueError("input ended early") from None
    return "".join(out)