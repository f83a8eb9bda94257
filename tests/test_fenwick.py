import pytest
from hypothesis import given
from hypothesis import strategies as st

from contestkit.fenwick import FenwickTree

arrays = st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=40)


def _build(values):
    tree = FenwickTree(len(values))
    for position, value in enumerate(values, start=1):
        tree.add(position, value)
    return tree


@given(arrays)
def test_prefix_sums_match(values):
    tree = _build(values)
    for i in range(len(values) + 1):
        assert tree.prefix_sum(i) == sum(values[:i])


@given(arrays, st.data())
def test_range_sums_match(values, data):
    tree = _build(values)
    left = data.draw(st.integers(min_value=1, max_value=len(values)))
    right = data.draw(st.integers(min_value=left, max_value=len(values)))
    assert tree.range_sum(left, right) == sum(values[left - 1 : right])


@given(arrays, st.data())
def test_repeated_adds_accumulate(values, data):
    tree = _build(values)
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    tree.add(position, 5)
    values[position - 1] += 5
    assert tree.prefix_sum(len(values)) == sum(values)
    assert tree.range_sum(position, position) == values[position - 1]


def test_fresh_tree_is_zero():
    tree = FenwickTree(5)
    assert tree.range_sum(1, 5) == 0
    assert len(tree) == 5


@pytest.mark.parametrize("index", [0, 6, -1])
def test_add_out_of_range(index):
    with pytest.raises(IndexError):
        FenwickTree(5).add(index, 1)


@pytest.mark.parametrize("index", [-1, 6])
def test_prefix_out_of_range(index):
    with pytest.raises(IndexError):
        FenwickTree(5).prefix_sum(index)


def test_negative_size():
    with pytest.raises(ValueError):
        FenwickTree(-1)