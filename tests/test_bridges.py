import pytest
from hypothesis import given, strategies as st

from contestkit.bridges import find_bridges, run


def test_path_order():
    assert find_bridges(3, [(1, 2), (2, 3)]) == [(3, 2), (2, 1)]


def test_cycle_has_no_bridges():
    assert find_bridges(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) == []


def test_triangle_with_tail():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    assert find_bridges(4, edges) == [(4, 3)]


def test_other_component_ignored():
    assert find_bridges(4, [(1, 2), (3, 4)]) == [(2, 1)]


def test_run_format():
    assert run("1\n3 2\n1 2\n2 3\n") == "3 2 form bridge\n2 1 form bridge\n"


def test_invalid_node():
    with pytest.raises(ValueError):
        find_bridges(2, [(1, 5)])


def test_no_nodes():
    with pytest.raises(ValueError):
        find_bridges(0, [])


@st.composite
def trees(draw):
    n = draw(st.integers(min_value=1, max_value=10))
    edges = [
        (draw(st.integers(min_value=1, max_value=child - 1)), child)
        for child in range(2, n + 1)
    ]
    return n, edges


@given(trees())
def test_every_tree_edge_is_a_bridge(tree):
    n, edges = tree
    found = find_bridges(n, edges)
    assert len(found) == n - 1
    assert {frozenset(e) for e in found} == {frozenset(e) for e in edges}


@given(trees())
def test_closing_a_cycle_through_root_removes_bridges_on_it(tree):
    n, edges = tree
    if n < 3:
        assert len(find_bridges(n, edges)) == n - 1
        return
    chain = [(k, k + 1) for k in range(1, n)]
    assert find_bridges(n, chain + [(n, 1)]) == []