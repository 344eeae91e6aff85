# arbor

Binary trees of integers whose nodes know their parent, plus the usual
algorithms on top of them: traversals, measures, rotations, binary search
trees, AVL trees and max binary heaps.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Nodes

`arbor.node.Node` is a dataclass with the fields `value`, `parent`, `left`
and `right`. Nodes compare by identity.

```python
from arbor.node import Node, lowest_common_ancestor, delete_tree
from arbor.traversal import preorder, inorder, postorder, levelorder

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

list(preorder(root))    # [98, 12, 54, 402]
list(inorder(root))     # [12, 54, 98, 402]
list(postorder(root))   # [54, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 54]

left.right.depth()                          # 2
left.right.uncle() is right                 # True
left.sibling() is right                     # True
lowest_common_ancestor(left.right, right)   # root
```

`insert_left` and `insert_right` push an existing child down one level: the
new node takes its place and the old child becomes the new node's child on
the same side. `is_leaf` and `is_root` test for missing children and a
missing parent. `lowest_common_ancestor` counts a node as its own ancestor
and returns `None` when the nodes are in different trees.

`delete_tree(node)` unlinks every node of a subtree and detaches it from its
parent.

The traversal functions are generators of values; an empty tree (`None`)
yields nothing.

## Measures

```python
from arbor.measures import height, size, count_leaves, is_complete

height(root)        # 2
size(root)          # 4
count_leaves(root)  # 2
is_complete(root)   # False
```

Also in `arbor.measures`: `count_internal` (nodes with at least one child),
`balance` (left levels minus right levels), `is_full` and `is_perfect`.
`is_full`, `is_perfect` and `is_complete` return `False` for an empty tree.

## Rotations

`arbor.rotation.rotate_left` and `rotate_right` rotate a subtree in place,
keep the parent links and the parent's child link right, and return the new
subtree root. They raise `ValueError` when the needed child is missing.

## Search trees

```python
from arbor.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

tree = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32])
bst_search(tree, 68).value   # 68
bst_insert(tree, 50)         # returns the new node
tree = bst_remove(tree, 79)
is_bst(tree)                 # True
```

`array_to_bst` skips repeated values. `bst_insert` raises `ValueError` for
a value already in the tree, and `bst_remove` raises `ValueError` for a
value that is not. A removed node with two children takes the value of its
in-order successor.

## AVL trees

```python
from arbor.avl import array_to_avl, avl_insert, avl_remove, sorted_array_to_avl, is_avl

tree = array_to_avl([98, 402, 12, 46, 128, 256, 512, 50])
is_avl(tree)   # True
tree = avl_remove(tree, 128)
tree = sorted_array_to_avl([1, 2, 20, 21, 22, 32, 34, 47, 62, 68])
```

`avl_insert(root, value)` returns the new node, not the root: rotations may
change the root, so follow `parent` links up from any node to find it.
`avl_remove` returns the new root, or `None` when the tree becomes empty.
`sorted_array_to_avl` picks the middle value (the left one of two middles)
as each subtree root.

## Max heaps

```python
from arbor.heap import array_to_heap, heap_insert, heap_extract, heap_to_sorted_list, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
is_heap(heap)                   # True
value, heap = heap_extract(heap)  # 91 and the heap's root afterwards
heap_to_sorted_list(heap)       # remaining values in descending order
```

`heap_insert` keeps the same root node and returns the node that holds the
inserted value after it has moved up. `heap_extract` raises `ValueError` on
an empty heap and returns `None` as the root once the last value is gone.
`heap_to_sorted_list` empties the heap it is given.

## What it does not do

arbor is a library only: it has no command-line tool, does not draw trees
as text, and does not save trees anywhere.