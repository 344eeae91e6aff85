"""Self-balancing AVL trees of distinct integers."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from arbor.bst import bst_insert, bst_remove, is_bst
from arbor.measures import balance
from arbor.node import Node
from arbor.rotation import rotate_left, rotate_right


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _top(node: Node) -> Node:
    while node.parent is not None:
        node = node.parent
    return node


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree of distinct values
    whose subtrees differ in height by at most one at every node.

    An empty tree is not an AVL tree.
    """
    if not is_bst(tree):
        return False
    return all(abs(balance(node)) <= 1 for node in _nodes(tree))


def avl_insert(root: Optional[Node], value: int) -> Node:
    """Insert a value, rebalancing on the way up, and return the new node.

    Rotations may change which node is the root; follow the parent links
    from any node to find it. Raises ValueError if the value is already
    in the tree.
    """
    new = bst_insert(root, value)
    node = new.parent
    while node is not None:
        factor = balance(node)
        if factor > 1:
            if value > node.left.value:
                rotate_left(node.left)
            node = rotate_right(node)
        elif factor < -1:
            if value < node.right.value:
                rotate_right(node.right)
            node = rotate_left(node)
        node = node.parent
    return new


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree by inserting values in order.

    Repeated values are skipped. Returns None for no values.
    """
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root = _top(avl_insert(root, value))
    return root


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    """Rebalance a subtree bottom-up and return its root afterwards."""
    if node is None:
        return None
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if balance(node.right) > 0:
            rotate_right(node.right)
        return rotate_left(node)
    return node


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value from the tree, rebalance it and return the new root.

    A node with two children takes the value of its in-order successor.
    Returns None when the tree becomes empty. Raises ValueError if the
    value is not in the tree.
    """
    return _rebalance(bst_remove(root, value))


def _build(values: Sequence[int], parent: Optional[Node]) -> Optional[Node]:
    if not values:
        return None
    middle = (len(values) - 1) // 2
    node = Node(values[middle], parent=parent)
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1 :], node)
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree from sorted values without rotations.

    The middle value becomes the root, the left one of the two middles
    when the count is even. Returns None for no values.
    """
    return _build(list(values), None)