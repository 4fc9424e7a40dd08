from typing import Any, List


class MinHeap:
    """Array-backed binary min-heap of :class:`HuffmanNode` ordered by ``<``.

    Ties are resolved purely by position: sift-up stops when the parent is
    not greater than the child, and sift-down only moves to the right child
    when it is strictly smaller than the left one. Decoders rely on this to
    rebuild exactly the tree the encoder used.

    :ivar heap: Heap-ordered list of nodes.
    :type heap: List[Any]
    """

    def __init__(self):
        """Create an empty heap.

        :returns: None
        :rtype: None
        """
        self.heap: List[Any] = []

    def __len__(self) -> int:
        return len(self.heap)

    def size(self) -> int:
        """Return the number of nodes in the heap.

        :rtype: int
        """
        return len(self.heap)

    def _swap(self, i: int, j: int):
        self.heap[i], self.heap[j] = self.heap[j], self.heap[i]

    def push(self, node):
        """Insert ``node`` and sift it up.

        :param node: Node to insert.
        :type node: HuffmanNode
        :returns: None
        :rtype: None
        """
        self.heap.append(node)
        child = len(self.heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if self.heap[parent] <= self.heap[child]:
                return
            self._swap(parent, child)
            child = parent

    def pop(self):
        """Remove and return the node with the lowest frequency.

        :returns: The root node.
        :rtype: HuffmanNode
        :raises IndexError: If the heap is empty.
        """
        if not self.heap:
            raise IndexError("pop from empty heap")
        node = self.heap[0]
        last = self.heap.pop()
        if not self.heap:
            return node
        self.heap[0] = last

        parent = 0
        child = 1
        while child < len(self.heap):
            right = child + 1
            if (
                right < len(self.heap)
                and self.heap[right] < self.heap[child]
            ):
                child = right
            if self.heap[parent] <= self.heap[child]:
                break
            self._swap(parent, child)
            parent = child
            child = 2 * child + 1
        return node
