"""AVL tree validation, construction, insertion and removal."""

from __future__ import annotations

from typing import Iterable, Sequence

from treekit.bst import bst_remove as _bst_remove
from treekit.bst import bst_search, is_bst
from treekit.node import Node
from treekit.properties import balance
from treekit.rotation import rotate_left, rotate_right


def _heights_balanced(tree: Node) -> bool:
    """Return True if no node's subtrees differ in height by more than one."""
    heights: dict[int, int] = {}
    stack: list[tuple[Node, bool]] = [(tree, False)]
    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            stack.extend(
                (child, False)
                for child in (node.right, node.left)
                if child is not None
            )
            continue
        left = heights.get(id(node.left), 0) if node.left is not None else 0
        right = heights.get(id(node.right), 0) if node.right is not None else 0
        if abs(left - right) > 1:
            return False
        heights[id(node)] = 1 + max(left, right)
    return True


def _top(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


def is_avl(tree: Node | None) -> bool:
    """Return True if the tree is a binary search tree with balanced heights.

    A missing tree is not an AVL tree.
    """
    if tree is None:
        return False
    return is_bst(tree) and _heights_balanced(tree)


def _rebalance_upwards(node: Node | None, value: int) -> None:
    """Restore balance on every ancestor of a freshly inserted ``value``."""
    while node is not None:
        factor = balance(node)
        if factor > 1:
            if node.left.value < value:
                rotate_left(node.left)
            node = rotate_right(node)
        elif factor < -1:
            if node.right.value > value:
                rotate_right(node.right)
            node = rotate_left(node)
        node = node.parent


def avl_insert(root: Node | None, value: int) -> Node | None:
    """Insert ``value`` into the AVL tree at ``root`` and return the new node.

    Rotations may change the root; the tree's root afterwards is the topmost
    ancestor of the returned node. With no root the new node is returned as
    the root of a new tree. Returns None if the value is already present.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                new = node.left = Node(value, node)
                break
            node = node.left
        elif value > node.value:
            if node.right is None:
                new = node.right = Node(value, node)
                break
            node = node.right
        else:
            return None
    _rebalance_upwards(new.parent, value)
    return new


def array_to_avl(values: Iterable[int]) -> Node | None:
    """Build an AVL tree by inserting values in order, skipping repeats."""
    root: Node | None = None
    for value in values:
        new = avl_insert(root, value)
        if new is not None:
            root = _top(new)
    return root


def _rebalance(node: Node | None) -> Node | None:
    """Rebalance the subtree bottom-up and return its root afterwards."""
    if node is None or (node.left is None and node.right is None):
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if balance(node.right) > 0:
            rotate_right(node.right)
        return rotate_left(node)
    return node


def avl_remove(root: Node | None, value: int) -> Node | None:
    """Remove ``value`` from the AVL tree and return the rebalanced root.

    A node with two children takes the value of its in-order successor.
    Removing an absent value leaves the tree as it is.
    """
    if root is None:
        return None
    if bst_search(root, value) is not None:
        root = _bst_remove(root, value)
    return _rebalance(root)


def sorted_array_to_avl(values: Sequence[int]) -> Node | None:
    """Build a balanced tree from sorted values, splitting on the middle.

    For an even count the lower of the two middle values becomes the root.
    """
    items = list(values)

    def build(low: int, high: int, parent: Node | None) -> Node | None:
        if low >= high:
            return None
        middle = low + (high - low - 1) // 2
        node = Node(items[middle], parent)
        node.left = build(low, middle, node)
        node.right = build(middle + 1, high, node)
        return node

    return build(0, len(items), None)