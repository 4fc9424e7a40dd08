from typing import Dict, Optional

from errors import EmptyInput
from minheap import MinHeap


class HuffmanNode:
    """Node for a binary Huffman tree.

    :ivar symbol: Character stored at a leaf; for internal nodes the
        concatenation of the children's symbols.
    :type symbol: str
    :ivar freq: Frequency (weight) of the subtree rooted at this node.
    :type freq: int
    :ivar left: Left child node (bit ``0``).
    :type left: HuffmanNode | None
    :ivar right: Right child node (bit ``1``).
    :type right: HuffmanNode | None
    """

    def __init__(
        self,
        symbol: str = "",
        freq: int = 0,
        left: "Optional[HuffmanNode]" = None,
        right: "Optional[HuffmanNode]" = None,
    ):
        """Create a Huffman node.

        :param str symbol: Symbol of a leaf, or the joined symbols below an
            internal node.
        :param int freq: Frequency (weight) associated with this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return self.freq < other.freq

    def __le__(self, other):
        return self.freq <= other.freq

    def __repr__(self):
        return f"HuffmanNode({self.symbol!r}, {self.freq})"


def build_tree(frequencies: Dict[str, int]) -> HuffmanNode:
    """Build a Huffman tree from a symbol frequency table.

    Leaves are pushed in table order, then the two cheapest nodes are merged
    (first popped goes left) until a single root remains. A table with one
    entry yields a lone leaf.

    :param frequencies: Mapping from symbol to frequency, in input order.
    :type frequencies: Dict[str, int]
    :returns: Root of the tree.
    :rtype: HuffmanNode
    :raises EmptyInput: If ``frequencies`` is empty.
    """
    if not frequencies:
        raise EmptyInput("Frequency table is empty")

    heap = MinHeap()
    for symbol, freq in frequencies.items():
        heap.push(HuffmanNode(symbol=symbol, freq=freq))

    while heap.size() > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(
            HuffmanNode(
                symbol=left.symbol + right.symbol,
                freq=left.freq + right.freq,
                left=left,
                right=right,
            )
        )

    return heap.pop()


def code_table(root: HuffmanNode) -> Dict[str, str]:
    """Map every leaf symbol of ``root`` to its bit path.

    Handy for inspecting a tree; the lone-leaf tree maps to an empty path.

    :param root: Tree root.
    :type root: HuffmanNode
    :returns: Mapping from symbol to a string of ``0``/``1``.
    :rtype: Dict[str, str]
    """
    codes: Dict[str, str] = {}
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        stack.append((node.right, path + "1"))
        stack.append((node.left, path + "0"))
    return codes
