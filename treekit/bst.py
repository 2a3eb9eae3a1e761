"""Binary search tree validation, insertion, lookup and removal."""

from __future__ import annotations

from typing import Iterable

from treekit.node import Node


def is_bst(tree: Node | None) -> bool:
    """Return True if values strictly increase in order with no duplicates.

    A missing tree is not a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Node | None, value: int) -> Node | None:
    """Insert ``value`` into the tree rooted at ``root`` and return the new node.

    With no root the new node is returned and becomes the root of a new tree.
    Returns None if the value is already present.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            return None


def array_to_bst(values: Iterable[int]) -> Node | None:
    """Build a binary search tree by inserting values in order, skipping repeats."""
    root: Node | None = None
    for value in values:
        new = bst_insert(root, value)
        if root is None:
            root = new
    return root


def bst_search(tree: Node | None, value: int) -> Node | None:
    """Return the node holding ``value``, or None if it is absent."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if node.value > value else node.right
    return None


def bst_remove(root: Node | None, value: int) -> Node | None:
    """Remove ``value`` from the tree and return the root afterwards.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. Raises KeyError if the value is absent.
    """
    node = bst_search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    replacement = node.right if node.left is None else node.left
    parent = node.parent
    if replacement is not None:
        replacement.parent = parent
    if parent is None:
        new_root = replacement
    else:
        if parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        new_root = root
    node.parent = node.left = node.right = None
    return new_root