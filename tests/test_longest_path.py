import pytest
from hypothesis import given, strategies as st

from contestkit.longest_path import longest_path, run


def test_worked_example():
    edges = [(1, 2), (1, 3), (3, 2), (2, 4), (3, 4)]
    assert longest_path(4, edges) == 3


def test_no_edges_gives_zero():
    assert longest_path(5, []) == 0


def test_empty_graph():
    assert longest_path(0, []) == -1


def test_run_format():
    assert run("4 5\n1 2\n1 3\n3 2\n2 4\n3 4\n") == "3"


def test_run_short_input():
    with pytest.raises(ValueError):
        run("3 2\n1 2\n")


def test_node_out_of_range():
    with pytest.raises(ValueError):
        longest_path(2, [(1, 3)])


@st.composite
def dags(draw):
    n = draw(st.integers(min_value=1, max_value=8))
    pairs = [(a, b) for a in range(1, n + 1) for b in range(a + 1, n + 1)]
    edges = draw(st.lists(st.sampled_from(pairs), max_size=15)) if pairs else []
    return n, edges


@given(dags())
def test_reversing_edges_keeps_length(graph):
    n, edges = graph
    reversed_edges = [(b, a) for a, b in edges]
    assert longest_path(n, edges) == longest_path(n, reversed_edges)


@given(dags())
def test_bounds(graph):
    n, edges = graph
    result = longest_path(n, edges)
    assert 0 <= result <= n - 1
    assert (result == 0) == (not edges)


@given(dags(), st.data())
def test_adding_edge_never_shortens(graph, data):
    n, edges = graph
    if n < 2:
        assert longest_path(n, edges) == 0
        return
    a = data.draw(st.integers(min_value=1, max_value=n - 1))
    b = data.draw(st.integers(min_value=a + 1, max_value=n))
    assert longest_path(n, edges + [(a, b)]) >= longest_path(n, edges)