"""Left and right rotations of binary trees."""

from __future__ import annotations

from treekit.node import Node


def _replace_in_parent(parent: Node | None, old: Node, new: Node) -> None:
    new.parent = parent
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Node) -> Node:
    """Rotate ``tree`` left and return the new subtree root (its right child).

    Raises ValueError if the tree is missing or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    tree.right = pivot.left
    if tree.right is not None:
        tree.right.parent = tree
    parent = tree.parent
    pivot.left = tree
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate ``tree`` right and return the new subtree root (its left child).

    Raises ValueError if the tree is missing or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    tree.left = pivot.right
    if tree.left is not None:
        tree.left.parent = tree
    parent = tree.parent
    pivot.right = tree
    tree.parent = pivot
    _replace_in_parent(parent, tree, pivot)
    return pivot