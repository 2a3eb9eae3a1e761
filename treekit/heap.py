"""Max binary heaps built from linked binary tree nodes."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from treekit.complete import is_complete
from treekit.node import Node
from treekit.properties import size


def _strictly_ordered(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.value >= node.value:
                    return False
                stack.append(child)
    return True


def is_heap(tree: Node | None) -> bool:
    """Return True if the tree is complete and every parent exceeds its children.

    A missing tree is not a heap.
    """
    if tree is None:
        return False
    return is_complete(tree) and _strictly_ordered(tree)


def _sift_up(node: Node) -> Node:
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def _sift_down(node: Node) -> None:
    while node.left is not None:
        if node.right is None or node.left.value > node.right.value:
            child = node.left
        else:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def heap_insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into the heap at ``root`` and return the node holding it.

    The new value is placed at the next free position of the complete tree and
    moved up while it exceeds its parent. With no root the new node is returned
    as the root of a new heap.
    """
    if root is None:
        return Node(value)
    path = bin(size(root) + 1)[3:]
    parent = root
    for bit in path[:-1]:
        parent = parent.right if bit == "1" else parent.left
    new = Node(value, parent)
    if path[-1] == "1":
        parent.right = new
    else:
        parent.left = new
    return _sift_up(new)


def array_to_heap(values: Iterable[int]) -> Node | None:
    """Build a max heap by inserting the values in order."""
    root: Node | None = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def _last_node(tree: Node) -> Node:
    """Return the rightmost node on the deepest level."""
    queue = deque([tree])
    last = tree
    while queue:
        last = queue.popleft()
        queue.extend(child for child in (last.left, last.right) if child is not None)
    return last


def heap_extract(root: Node | None) -> tuple[int, Node | None]:
    """Remove the root value of the heap.

    Returns the extracted value and the heap's root afterwards, which is None
    once the heap is empty. Raises IndexError for an empty heap.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.left is None and root.right is None:
        return value, None
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return value, root


def heap_to_sorted_array(heap: Node | None) -> list[int]:
    """Empty the heap and return its values in descending order."""
    result = []
    while heap is not None:
        value, heap = heap_extract(heap)
        result.append(value)
    return result