import pytest

from huffman import HuffmanNode
from minheap import MinHeap


def _push_all(heap, items):
    for symbol, freq in items:
        heap.push(HuffmanNode(symbol=symbol, freq=freq))


def test_pop_returns_ascending_frequencies():
    heap = MinHeap()
    _push_all(heap, [("a", 5), ("b", 3), ("c", 8), ("d", 1), ("e", 3)])
    assert heap.size() == 5
    freqs = [heap.pop().freq for _ in range(5)]
    assert freqs == [1, 3, 3, 5, 8]
    assert len(heap) == 0


def test_heap_invariant_holds_after_pushes():
    heap = MinHeap()
    _push_all(heap, [(str(i), f) for i, f in enumerate([9, 4, 7, 1, 8, 2, 2, 6])])
    for i in range(1, heap.size()):
        assert heap.heap[(i - 1) // 2].freq <= heap.heap[i].freq


def test_equal_frequency_push_keeps_parent():
    heap = MinHeap()
    _push_all(heap, [("x", 2), ("y", 2)])
    assert [n.symbol for n in heap.heap] == ["x", "y"]


def test_tie_order_follows_sift_mechanics():
    heap = MinHeap()
    _push_all(heap, [("a", 1), ("b", 2), ("c", 2)])
    # "c" is moved to the root on the first pop and stays there on a tie
    assert [heap.pop().symbol for _ in range(3)] == ["a", "c", "b"]


def test_sift_down_prefers_strictly_smaller_right_child():
    heap = MinHeap()
    _push_all(heap, [("r", 0), ("a", 3), ("b", 2), ("z", 9)])
    assert heap.pop().symbol == "r"
    assert heap.pop().symbol == "b"


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        _ = MinHeap().pop()


def test_heap_orders_with_node_comparisons():
    class Node:
        def __init__(self, symbol, key):
            self.symbol = symbol
            self.key = key

        def __lt__(self, other):
            return self.key < other.key

        def __le__(self, other):
            return self.key <= other.key

    heap = MinHeap()
    for symbol, key in [("a", 4), ("b", 1), ("c", 3)]:
        heap.push(Node(symbol, key))
    assert [heap.pop().symbol for _ in range(3)] == ["b", "c", "a"]
