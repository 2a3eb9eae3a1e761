"""Measurements and shape checks over whole binary trees."""

from __future__ import annotations

from typing import Iterator

from treekit.node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _levels(tree: Node | None) -> Iterator[list[Node]]:
    level = [tree] if tree is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    return max(sum(1 for _ in _levels(tree)) - 1, 0)


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for n in _nodes(tree) if n.left is None and n.right is None)


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for n in _nodes(tree) if n.left is not None or n.right is not None)


def _level_count(tree: Node | None) -> int:
    return 0 if tree is None else height(tree) + 1


def balance(tree: Node | None) -> int:
    """Return the left subtree's level count minus the right's; 0 for None."""
    if tree is None:
        return 0
    return _level_count(tree.left) - _level_count(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((n.left is None) == (n.right is None) for n in _nodes(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if the tree is full and all its leaves share one depth."""
    if tree is None:
        return False
    leaf_depths = set()
    for level_number, level in enumerate(_levels(tree)):
        for node in level:
            if (node.left is None) != (node.right is None):
                return False
            if node.left is None:
                leaf_depths.add(level_number)
    return len(leaf_depths) == 1