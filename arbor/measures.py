"""Size, shape and balance measurements of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbor.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the tree, in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _levels(tree: Optional[Node]) -> int:
    """Return the number of levels in the tree: 0 for an empty tree, 1 for a leaf."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return count


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path down from the root.

    A single node and an empty tree both have height 0.
    """
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def count_leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def count_internal(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: left subtree levels minus right subtree levels."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children.

    An empty tree is not full.
    """
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of the tree is completely filled.

    An empty tree is not perfect.
    """
    if tree is None:
        return False
    return size(tree) == 2 ** _levels(tree) - 1


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last,
    which is filled from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True