import pytest

from arbor.measures import (
    balance,
    count_internal,
    count_leaves,
    height,
    is_complete,
    is_full,
    is_perfect,
    size,
)
from arbor.node import Node
from arbor.traversal import preorder


def _perfect_tree() -> Node:
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(16)
    right.insert_left(256)
    right.insert_right(512)
    return root


def _chain(values) -> Node:
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.insert_left(value)
    return root


def test_empty_tree_measures_nothing():
    assert size(None) == count_leaves(None) == count_internal(None) == height(None) == balance(None) == 0


def test_empty_tree_has_no_shape():
    assert not is_full(None)
    assert not is_perfect(None)
    assert not is_complete(None)


def test_single_node():
    leaf = Node(7)
    assert height(leaf) == height(None)
    assert size(leaf) == count_leaves(leaf)
    assert count_internal(leaf) == size(None)
    assert balance(leaf) == balance(None)
    assert is_full(leaf)
    assert is_perfect(leaf)
    assert is_complete(leaf)


def test_perfect_tree_height_is_pinned():
    assert height(_perfect_tree()) == 2


def test_perfect_tree_shape():
    tree = _perfect_tree()
    assert is_full(tree)
    assert is_perfect(tree)
    assert is_complete(tree)
    assert balance(tree) == balance(None)


def test_size_matches_traversal():
    tree = _perfect_tree()
    assert size(tree) == len(list(preorder(tree)))


def test_leaves_and_internal_partition_nodes():
    tree = _perfect_tree()
    tree.left.left.insert_left(1)
    assert count_leaves(tree) + count_internal(tree) == size(tree)


def test_full_tree_has_one_more_leaf_than_internal_node():
    tree = _perfect_tree()
    assert count_leaves(tree) == count_internal(tree) + 1


@pytest.mark.parametrize("values", [[1, 2], [5, 4, 3], [9, 8, 7, 6, 5]])
def test_chain_height_and_size(values):
    tree = _chain(values)
    assert height(tree) == len(values) - 1
    assert size(tree) == len(values)
    assert count_internal(tree) == len(values) - 1


def test_balance_with_left_subtree_only():
    root = _chain([10, 9, 8])
    assert balance(root) == height(root.left) + 1


def test_balance_with_right_subtree_only():
    root = Node(10)
    root.insert_right(11).insert_right(12)
    assert balance(root) == -(height(root.right) + 1)


def test_balance_is_left_minus_right():
    tree = _perfect_tree()
    tree.left.left.insert_left(1)
    assert balance(tree) == height(tree.left) - height(tree.right)


def test_single_child_is_not_full():
    tree = _perfect_tree()
    tree.left.left.insert_left(1)
    assert not is_full(tree)
    assert not is_perfect(tree)


def test_full_but_not_perfect():
    tree = _perfect_tree()
    leaf = tree.left.left
    leaf.insert_left(1)
    leaf.insert_right(2)
    assert is_full(tree)
    assert not is_perfect(tree)
    assert is_complete(tree)


def test_complete_with_partial_last_level():
    tree = _perfect_tree()
    tree.left.left.insert_left(1)
    assert is_complete(tree)


def test_gap_on_the_left_is_not_complete():
    tree = _perfect_tree()
    tree.left.left.insert_right(1)
    assert not is_complete(tree)


def test_gap_in_the_middle_of_a_level_is_not_complete():
    root = Node(1)
    root.insert_left(2)
    root.insert_right(3).insert_left(4)
    assert not is_complete(root)