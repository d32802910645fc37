import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.btree import BTree

SOURCE_KEYS = [10, 20, 5, 6, 12, 30, 7, 17]


def _build(keys, min_degree=3):
    tree = BTree(min_degree)
    for key in keys:
        tree.insert(key)
    return tree


def test_source_scenario():
    tree = _build(SOURCE_KEYS)
    assert tree.inorder() == sorted(SOURCE_KEYS)
    assert tree.search(6)
    assert 11 not in tree


def test_source_scenario_root_after_split():
    tree = _build(SOURCE_KEYS)
    unindented = [line for line in tree.render().splitlines() if not line.startswith(" ")]
    assert unindented == ["10"]


def test_single_leaf_render():
    tree = _build([3, 1, 2])
    assert tree.render() == "1\n2\n3\n"


def test_duplicates_are_kept():
    tree = _build([5, 5, 5])
    assert tree.inorder() == [5, 5, 5]
    assert 5 in tree


def test_empty_tree():
    tree = BTree()
    assert tree.inorder() == []
    assert tree.render() == ""
    assert not tree.search(0)


def test_rejects_small_degree():
    with pytest.raises(ValueError):
        BTree(1)


@given(st.lists(st.integers(-500, 500), max_size=200), st.integers(2, 5))
def test_inorder_is_sorted_and_complete(keys, min_degree):
    tree = _build(keys, min_degree)
    assert tree.inorder() == sorted(keys)
    assert all(key in tree for key in keys)


@given(
    st.lists(st.integers(0, 100), max_size=100),
    st.lists(st.integers(101, 200), max_size=20),
)
def test_absent_keys_not_found(keys, absent):
    tree = _build(keys)
    assert not any(key in tree for key in absent)


@given(st.lists(st.integers(0, 999), max_size=150), st.integers(2, 4))
def test_render_lines_match_inorder(keys, min_degree):
    tree = _build(keys, min_degree)
    lines = tree.render().splitlines()
    assert [int(line.strip()) for line in lines] == tree.inorder()
    for line in lines:
        indent = len(line) - len(line.lstrip(" "))
        assert indent % 4 == 0