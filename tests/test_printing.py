from hypothesis import given
from hypothesis import strategies as st

from treekit.bst import array_to_bst
from treekit.node import Node, insert_left
from treekit.printing import format_tree, print_tree
from treekit.properties import height
from treekit.traversal import preorder


def test_missing_tree_formats_to_nothing():
    assert format_tree(None) == ""


def test_single_node_label_is_zero_padded():
    assert format_tree(Node(98)) == "(098)"


def test_negative_value_label():
    assert format_tree(Node(-5)) == "(-05)"


def test_left_child_drawing():
    root = Node(1)
    insert_left(root, 2)
    assert format_tree(root) == "  .--(001)\n(002)"


def test_three_level_drawing():
    root = array_to_bst([98, 402, 12, 54, 128])
    expected = "\n".join(
        [
            "  .-------(098)-------.",
            "(012)--.         .--(402)",
            "     (054)     (128)",
        ]
    )
    assert format_tree(root) == expected


@given(st.lists(st.integers(min_value=0, max_value=999), min_size=1, max_size=30))
def test_drawing_has_one_line_per_level_and_every_label(values):
    root = array_to_bst(values)
    text = format_tree(root)
    lines = text.split("\n")
    assert len(lines) == height(root) + 1
    for value in preorder(root):
        assert f"({value:03d})" in text
    assert all(line == line.rstrip() for line in lines)
    assert f"({root.value:03d})" in lines[0]


def test_print_tree_writes_drawing(capsys):
    root = array_to_bst([98, 402, 12, 54, 128])
    print_tree(root)
    assert capsys.readouterr().out == format_tree(root) + "\n"


def test_print_missing_tree_writes_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""