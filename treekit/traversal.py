"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from treekit.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values node first, then left subtree, then right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        stack.extend(child for child in (node.right, node.left) if child is not None)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree first, then the node, then right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree first, then right subtree, then the node."""
    stack = [tree] if tree is not None else []
    reversed_order = []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    yield from reversed(reversed_order)


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right within a level."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)