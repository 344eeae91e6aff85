"""Binary tree nodes and the relations between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a binary tree holding an integer value.

    Nodes compare by identity. The parent link is left out of the repr
    so that printing a subtree does not walk back up the tree.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any old left child becomes its left child."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any old right child becomes its right child."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in self._ancestors()) - 1

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def _ancestors(self) -> Iterator[Node]:
        """Yield this node, then each ancestor up to the root."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.parent


def delete_tree(tree: Optional[Node]) -> None:
    """Dismantle a tree, unlinking every node in it.

    The root is also detached from its parent, if it has one.
    """
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes.

    A node counts as its own ancestor. Returns None if either node is
    None or the nodes are not in the same tree.
    """
    if first is None or second is None:
        return None
    seen = {id(node) for node in first._ancestors()}
    return next((node for node in second._ancestors() if id(node) in seen), None)