import pytest

from arbor.heap import array_to_heap, heap_extract, heap_insert, heap_to_sorted_list, is_heap
from arbor.measures import size
from arbor.node import Node
from arbor.traversal import levelorder

SAMPLES = [
    [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95],
    list(range(1, 30)),
    list(range(30, 0, -1)),
    [7],
]


def test_is_heap_empty_is_false():
    assert is_heap(None) is False


def test_is_heap_rejects_equal_child():
    root = Node(5)
    root.insert_left(5)
    assert is_heap(root) is False


def test_is_heap_rejects_incomplete():
    root = Node(10)
    root.insert_right(3)
    assert is_heap(root) is False


def test_is_heap_rejects_smaller_parent():
    root = Node(1)
    root.insert_left(4)
    root.insert_right(2)
    assert is_heap(root) is False


def test_is_heap_accepts_valid():
    root = Node(9)
    root.insert_left(4).insert_left(1)
    root.insert_right(6)
    assert is_heap(root) is True


def test_insert_into_empty():
    node = heap_insert(None, 7)
    assert node.value == 7
    assert node.is_root()


def test_insert_returns_node_holding_value():
    root = heap_insert(None, 10)
    for value in [3, 8, 12, 1, 15]:
        node = heap_insert(root, value)
        assert node.value == value
        assert is_heap(root)


def test_small_heap_layout():
    root = array_to_heap([1, 2, 3])
    assert list(levelorder(root)) == [3, 1, 2]


@pytest.mark.parametrize("values", SAMPLES)
def test_array_to_heap_invariants(values):
    root = array_to_heap(values)
    assert is_heap(root)
    assert size(root) == len(values)
    assert sorted(levelorder(root)) == sorted(values)
    assert root.value == max(values)


def test_array_to_heap_empty():
    assert array_to_heap([]) is None


def test_duplicates_are_not_a_strict_heap():
    assert is_heap(array_to_heap([5, 5])) is False


@pytest.mark.parametrize("values", SAMPLES[:3])
def test_extract_returns_max_and_keeps_heap(values):
    root = array_to_heap(values)
    value, root = heap_extract(root)
    assert value == max(values)
    assert is_heap(root)
    assert size(root) == len(values) - 1


def test_extract_last_value_empties_heap():
    value, root = heap_extract(Node(4))
    assert value == 4
    assert root is None


def test_extract_empty_raises():
    with pytest.raises(ValueError):
        heap_extract(None)


@pytest.mark.parametrize("values", SAMPLES)
def test_sorted_list_descending(values):
    assert heap_to_sorted_list(array_to_heap(values)) == sorted(values, reverse=True)


def test_sorted_list_of_empty_heap():
    assert heap_to_sorted_list(None) == []