"""Depth-first and breadth-first traversals of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbor.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    if tree is None:
        return
    stack: list[tuple[Node, bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)