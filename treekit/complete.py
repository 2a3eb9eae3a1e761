"""Completeness check for binary trees."""

from __future__ import annotations

from collections import deque

from treekit.node import Node


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is filled left to right with no gaps.

    A missing tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True