"""The binary tree node and operations on single nodes and their relatives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node with a parent does not attach it as a child of that parent.
    """

    value: int
    parent: Node | None = None
    left: Node | None = None
    right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _lineage(node: Node | None) -> Iterator[Node]:
    """Yield the node itself followed by each of its ancestors up to the root."""
    while node is not None:
        yield node
        node = node.parent


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete(tree: Node | None) -> None:
    """Detach ``tree`` from its parent and unlink every node beneath it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def is_leaf(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def depth(node: Node | None) -> int:
    """Return the number of edges from ``node`` up to its root; 0 for None."""
    if node is None:
        return 0
    return sum(1 for _ in _lineage(node.parent))


def sibling(node: Node | None) -> Node | None:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes (or one of them).

    Returns None when either node is missing or they share no tree.
    """
    if first is None or second is None:
        return None
    seen = {id(node) for node in _lineage(first)}
    return next((node for node in _lineage(second) if id(node) in seen), None)