import pytest
from hypothesis import given
from hypothesis import strategies as st

from treekit.complete import is_complete
from treekit.node import Node, delete, insert_left, insert_right


def heap_shaped(count):
    """Build a tree of ``count`` nodes filled level by level, left to right."""
    nodes = [Node(0)]
    for index in range(1, count):
        parent = nodes[(index - 1) // 2]
        insert = insert_left if index % 2 else insert_right
        nodes.append(insert(parent, index))
    return nodes


def test_missing_tree_is_not_complete():
    assert is_complete(None) is False


def test_single_node_is_complete():
    assert is_complete(Node(1)) is True


@given(st.integers(min_value=1, max_value=80))
def test_level_filled_trees_are_complete(count):
    assert is_complete(heap_shaped(count)[0]) is True


@pytest.mark.parametrize("count", [3, 4, 7, 12, 40])
def test_root_without_left_subtree_is_not_complete(count):
    nodes = heap_shaped(count)
    delete(nodes[1])
    assert nodes[0].left is None
    assert is_complete(nodes[0]) is False


def test_gap_before_later_child_is_not_complete():
    nodes = heap_shaped(4)
    assert is_complete(nodes[0]) is True
    insert_left(nodes[2], 99)
    assert is_complete(nodes[0]) is False


def test_right_child_without_left_child_is_not_complete():
    root = Node(1)
    insert_right(root, 2)
    assert is_complete(root) is False