import pytest
from hypothesis import given
from hypothesis import strategies as st

from treekit.bst import array_to_bst, bst_insert, bst_remove, bst_search, is_bst
from treekit.node import Node, insert_left, insert_right
from treekit.properties import size
from treekit.traversal import inorder, preorder

values_lists = st.lists(st.integers(min_value=-1000, max_value=1000))


def links_consistent(tree):
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.parent is not node:
                    return False
                stack.append(child)
    return True


def test_missing_tree_is_not_bst():
    assert is_bst(None) is False


def test_out_of_range_grandchild_is_not_bst():
    root = Node(5)
    left = insert_left(root, 3)
    insert_right(left, 7)
    assert is_bst(root) is False


def test_duplicate_value_is_not_bst():
    root = Node(5)
    insert_right(root, 5)
    assert is_bst(root) is False


def test_insert_into_empty_tree_returns_root():
    node = bst_insert(None, 42)
    assert node.value == 42
    assert node.parent is None


def test_insert_places_node_under_parent():
    root = bst_insert(None, 10)
    node = bst_insert(root, 4)
    assert root.left is node
    assert node.parent is root


def test_insert_duplicate_returns_none():
    root = array_to_bst([3, 1, 4])
    assert bst_insert(root, 4) is None
    assert size(root) == 3


def test_array_to_bst_shape_follows_insertion_order():
    root = array_to_bst([98, 402, 12, 54, 128])
    assert list(preorder(root)) == [98, 12, 54, 402, 128]


def test_array_to_bst_empty_is_none():
    assert array_to_bst([]) is None


@given(values_lists)
def test_array_to_bst_is_sorted_and_unique(values):
    root = array_to_bst(values)
    assert list(inorder(root)) == sorted(set(values))
    assert links_consistent(root)
    if values:
        assert is_bst(root)


@given(values_lists, st.integers(min_value=-1000, max_value=1000))
def test_search_finds_exactly_present_values(values, probe):
    root = array_to_bst(values)
    for value in values:
        assert bst_search(root, value).value == value
    found = bst_search(root, probe)
    assert (found is not None) == (probe in values)


def test_remove_root_with_two_children_uses_successor():
    root = array_to_bst([5, 3, 8, 7, 9])
    result = bst_remove(root, 5)
    assert result is root
    assert root.value == 7
    assert list(inorder(result)) == [3, 7, 8, 9]
    assert links_consistent(result)


def test_remove_only_node_leaves_empty_tree():
    assert bst_remove(Node(1), 1) is None


def test_remove_root_with_single_child_promotes_child():
    root = array_to_bst([5, 3, 1])
    child = root.left
    result = bst_remove(root, 5)
    assert result is child
    assert result.parent is None


def test_remove_missing_value_raises():
    root = array_to_bst([2, 1, 3])
    with pytest.raises(KeyError):
        bst_remove(root, 10)
    with pytest.raises(KeyError):
        bst_remove(None, 1)


@given(values_lists.filter(bool), st.data())
def test_remove_keeps_search_tree(values, data):
    root = array_to_bst(values)
    remaining = sorted(set(values))
    order = data.draw(st.permutations(remaining))
    for value in order:
        root = bst_remove(root, value)
        remaining.remove(value)
        assert list(inorder(root)) == remaining
        assert bst_search(root, value) is None
        assert links_consistent(root)
        if root is not None:
            assert root.parent is None
            assert is_bst(root)
    assert root is None