"""Text drawing of binary trees."""

from __future__ import annotations

from treekit.node import Node
from treekit.properties import height


def format_tree(tree: Node | None) -> str:
    """Return a multi-line drawing of the tree, one line per level.

    Each node is drawn as its value padded to three digits in parentheses,
    joined to its children by dashes with a dot above each child.
    """
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]

    def put(level: int, column: int, text: str) -> None:
        row = rows[level]
        end = column + len(text)
        if len(row) < end:
            row.extend(" " * (end - len(row)))
        row[column:end] = text

    def place(node: Node | None, offset: int, level: int) -> int:
        if node is None:
            return 0
        label = f"({node.value:03d})"
        width = len(label)
        is_left = node.parent is not None and node.parent.left is node
        left = place(node.left, offset, level + 1)
        right = place(node.right, offset + left + width, level + 1)
        put(level, offset + left, label)
        if level:
            if is_left:
                put(level - 1, offset + left + width // 2, "-" * (width + right))
            else:
                put(level - 1, offset - width // 2, "-" * (left + width))
            put(level - 1, offset + left + width // 2, ".")
        return left + width + right

    place(tree, 0, 0)
    return "\n".join("".join(row).rstrip() for row in rows)


def print_tree(tree: Node | None) -> None:
    """Print the drawing of the tree; nothing is printed for a missing tree."""
    text = format_tree(tree)
    if text:
        print(text)