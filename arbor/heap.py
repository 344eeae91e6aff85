"""Max binary heaps kept as complete binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from arbor.measures import is_complete, size
from arbor.node import Node


def _strictly_ordered(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if node.value <= child.value:
                    return False
                stack.append(child)
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and every node is strictly
    greater than its children.

    An empty tree is not a heap.
    """
    if tree is None:
        return False
    return is_complete(tree) and _strictly_ordered(tree)


def heap_insert(root: Optional[Node], value: int) -> Node:
    """Insert a value and return the node that holds it afterwards.

    The value goes into the first free slot of the last level and moves
    up while it is greater than its parent's. The root node stays the
    same; when root is None the new node is the root of a new heap.
    """
    if root is None:
        return Node(value)
    path = bin(size(root) + 1)[3:]
    parent = root
    for bit in path[:-1]:
        parent = parent.right if bit == "1" else parent.left
    node = Node(value, parent=parent)
    if path[-1] == "1":
        parent.right = node
    else:
        parent.left = node
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting values in order.

    Returns None for no values.
    """
    root: Optional[Node] = None
    for value in values:
        node = heap_insert(root, value)
        if root is None:
            root = node
    return root


def _last_node(root: Node) -> Node:
    queue = deque([root])
    node = root
    while queue:
        node = queue.popleft()
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return node


def _sift_down(node: Node) -> None:
    while node.left is not None:
        child = node.left
        if node.right is not None and node.right.value >= child.value:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the root value and return it with the heap's root afterwards.

    The root is None once the last value is gone. Raises ValueError if
    the heap is empty.
    """
    if root is None:
        raise ValueError("cannot extract from an empty heap")
    value = root.value
    if root.is_leaf():
        return value, None
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return value, root


def heap_to_sorted_list(heap: Optional[Node]) -> list[int]:
    """Empty the heap and return its values in descending order."""
    values: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        values.append(value)
    return values