# treekit

This package provides linked binary trees with parent pointers. It also builds
the usual structures on top of them: binary search trees, AVL trees and max
binary heaps.

A tree is made of `treekit.node.Node` objects. Each node holds an integer
`value` and links to its `parent`, `left` and `right` nodes. An empty tree is
`None`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building trees by hand

```python
from treekit.node import Node, insert_left, insert_right, depth, sibling, uncle
from treekit.printing import print_tree

root = Node(98)
left = insert_left(root, 12)
right = insert_right(root, 402)
insert_right(left, 54)
insert_left(right, 128)

print_tree(root)
print(depth(left))            # 1
print(sibling(left).value)    # 402
```

How the node functions behave:

- `insert_left` and `insert_right` push any existing child down one level. The
  new node takes that child's place and the old child hangs below it.
- Passing `None` as the parent raises `ValueError`.
- Creating `Node(value, parent)` directly does not attach the node to `parent`.

`treekit.node` also has the following functions:

- `is_leaf`
- `is_root`
- `uncle`
- `lowest_common_ancestor`, which returns `None` when the two nodes share no tree.
- `delete`, which detaches a subtree from its parent and unlinks every node in it.

`treekit.printing.print_tree` draws the tree as text. Each node appears as its
value padded to three digits, for example `(098)`. `format_tree` returns the
same drawing as a string, and returns `""` for an empty tree.

## Measuring and walking

`treekit.properties` has these functions:

- `height`, which counts edges and returns `0` for a single node or `None`.
- `size`
- `leaves`
- `internal_nodes`
- `balance`
- `is_full`
- `is_perfect`

`treekit.traversal` has `preorder`, `inorder`, `postorder` and `levelorder`.
Each is a generator that yields node values in the order the walk visits them:

```python
from treekit.traversal import inorder, levelorder

list(inorder(root))
list(levelorder(root))
```

`treekit.complete.is_complete` tells whether a tree is complete.

`treekit.rotation` has `rotate_left` and `rotate_right`. Each returns the new
root of the subtree it turned. Each raises `ValueError` when the needed child
is missing.

## Binary search trees

```python
from treekit.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

root = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95])
node = bst_search(root, 32)
root = bst_remove(root, 79)
assert is_bst(root)
```

The BST functions work as follows:

- `bst_insert(root, value)` returns the new node. It returns `None` when the
  value is already present, so duplicates are ignored.
- `bst_remove` returns the root of the tree after the removal. It raises
  `KeyError` for a value that is not in the tree.
- When the removed node has two children, it takes the value of its in-order
  successor, and the successor node is removed in its place.

## AVL trees

```python
from treekit.avl import array_to_avl, avl_insert, avl_remove, sorted_array_to_avl, is_avl

root = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
root = avl_remove(root, 46)
balanced = sorted_array_to_avl([1, 2, 20, 21, 22, 32, 34, 47])
assert is_avl(balanced)
```

The AVL functions work as follows:

- `avl_insert(root, value)` returns the inserted node, or `None` for a
  duplicate. Its rotations may change the root. The tree's new root is the
  topmost ancestor of the returned node.
- `avl_remove` returns the rebalanced root. Removing a value that is absent
  leaves the tree unchanged.
- `sorted_array_to_avl` splits on the middle value. When the count is even,
  the lower of the two middle values becomes the root.

## Max binary heaps

```python
from treekit.heap import array_to_heap, heap_extract, heap_insert, heap_to_sorted_array, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
assert is_heap(heap)

largest, heap = heap_extract(heap)    # (91, new root)
values = heap_to_sorted_array(heap)   # remaining values, largest first
```

The heap functions work as follows:

- `heap_insert(root, value)` places the value at the next free position and
  moves it up. It returns the node that ends up holding the value.
- `heap_extract` returns the extracted value together with the heap's new root.
  The root is `None` once the heap is empty. Calling it on an empty heap raises
  `IndexError`.
- `heap_to_sorted_array` empties the heap it is given.

## What it does not do

treekit is a library only. It has no command-line program, and it does not
save trees to or load them from files.