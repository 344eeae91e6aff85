"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from arbor.node import Node


def _replace_in_parent(parent: Optional[Node], old: Node, new: Node) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate the tree left around its root and return the new root.

    Raises ValueError if the tree is empty or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate the tree right around its root and return the new root.

    Raises ValueError if the tree is empty or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_in_parent(parent, tree, pivot)
    return pivot