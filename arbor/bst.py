"""Binary search trees of distinct integers."""

from __future__ import annotations

from typing import Iterable, Optional

from arbor.node import Node


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a binary search tree of distinct values.

    An empty tree is not a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def bst_insert(root: Optional[Node], value: int) -> Node:
    """Insert a value and return the node created for it.

    When root is None the new node is the root of a new tree.
    Raises ValueError if the value is already in the tree.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, parent=node)
                return node.left
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, parent=node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting values in order.

    Repeated values are skipped. Returns None for no values.
    """
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding value, or None if it is not in the tree."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.left if value < node.value else node.right
    return None


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove value from the tree and return the root afterwards.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. Raises ValueError if the value is not
    in the tree.
    """
    node = bst_search(root, value)
    if node is None:
        raise ValueError(f"value {value} is not in the tree")
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor

    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    if parent is not None:
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
    new_root = child if node is root else root
    node.parent = node.left = node.right = None
    return new_root