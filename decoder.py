from typing import NamedTuple

from bitops import BitReader
from errors import FormatError, InvalidTree, TruncatedInput
from frequencies import (
    BitHeader,
    FrequencyTable,
    Header,
    parse_frequencies,
    read_bit_header,
)
from huffman import HuffmanNode, build_tree
from layout import Buffer


class DecodeInfo(NamedTuple):
    """Everything parsed from a buffer ahead of its payload.

    :ivar header: Leading header record.
    :ivar frequencies: Symbol frequency table in input order.
    :ivar bit_header: Header record preceding the payload.
    :ivar payload_size: Number of bytes remaining after the bit header.
    """

    header: Header
    frequencies: FrequencyTable
    bit_header: BitHeader
    payload_size: int


class HuffmanDecoder:
    """Decoder for frequency-table-prefixed Huffman buffers.

    Buffer layout (little-endian, unsigned):
    - ``[u32 total_size][u32 reserved][u32 symbol_count]``
    - ``symbol_count`` times ``[u32 frequency][u8 symbol][3 bytes pad]``
    - ``[u32 packed_bits][u32 packed_bytes][u32 symbol_total]``
    - Packed payload, MSB-first, ``packed_bits`` of it meaningful.

    Instances hold no state between calls.
    """

    def inspect(self, data: Buffer) -> DecodeInfo:
        """Parse both headers and the frequency table of ``data``.

        :param data: Encoded buffer.
        :type data: bytes | bytearray | memoryview
        :returns: Parsed header information.
        :rtype: DecodeInfo
        :raises FormatError: If any header section is truncated.
        """
        frequencies, header, rest = parse_frequencies(data)
        bit_header, payload = read_bit_header(rest)
        return DecodeInfo(header, frequencies, bit_header, len(payload))

    def decode(self, data: Buffer, strict: bool = False) -> str:
        """Decode ``data`` back to the original text.

        :param data: Encoded buffer.
        :type data: bytes | bytearray | memoryview
        :param strict: Also check the informational header fields (buffer
            size, payload size, symbol count) against what was decoded.
        :type strict: bool
        :returns: Decoded text, one character per symbol.
        :rtype: str
        :raises FormatError: If the buffer is malformed.
        """
        frequencies, header, rest = parse_frequencies(data)
        tree = build_tree(frequencies)
        bit_header, payload = read_bit_header(rest)
        bits = BitReader(payload, bit_header.packed_bits)

        if strict:
            self._check_sizes(data, header, bit_header, payload)

        if tree.is_leaf and len(bits) > 0:
            raise InvalidTree(
                f"Single-symbol table {tree.symbol!r} cannot consume "
                f"{len(bits)} bits"
            )

        symbols = []
        pos = 0
        while pos < len(bits):
            symbol, pos = self._decode_symbol(bits, pos, tree)
            symbols.append(symbol)
        text = "".join(symbols)

        if strict and len(text) != bit_header.symbol_total:
            raise FormatError(
                f"Decoded {len(text)} symbols, header declares "
                f"{bit_header.symbol_total}"
            )
        return text

    @staticmethod
    def _check_sizes(
        data: Buffer, header: Header, bit_header: BitHeader, payload: Buffer
    ):
        size = len(memoryview(data))
        if header.total_size != size:
            raise FormatError(
                f"Header declares {header.total_size} bytes, got {size}"
            )
        if bit_header.packed_bytes != len(payload):
            raise FormatError(
                f"Header declares {bit_header.packed_bytes} payload bytes, "
                f"got {len(payload)}"
            )

    @staticmethod
    def _decode_symbol(bits: BitReader, pos: int, tree: HuffmanNode):
        """Walk ``tree`` from the root, starting at bit ``pos``.

        :param bits: Bitstream to read from.
        :type bits: BitReader
        :param pos: Index of the first bit of the codeword.
        :type pos: int
        :param tree: Root of the Huffman tree.
        :type tree: HuffmanNode
        :returns: Tuple ``(symbol, next_pos)``.
        :rtype: Tuple[str, int]
        :raises TruncatedInput: If the bitstream ends mid-codeword.
        :raises InvalidTree: If a bit leads to a missing child.
        """
        node = tree
        while True:
            if pos >= len(bits):
                raise TruncatedInput(
                    f"Bitstream ends inside a codeword at bit {pos}"
                )
            node = node.right if bits.get(pos) else node.left
            pos += 1
            if node is None:
                raise InvalidTree(f"No tree node for code ending at bit {pos}")
            if node.is_leaf:
                return node.symbol, pos


def decode(data: Buffer, strict: bool = False) -> str:
    """Decode ``data`` with a fresh :class:`HuffmanDecoder`.

    :param data: Encoded buffer.
    :type data: bytes | bytearray | memoryview
    :param bool strict: See :meth:`HuffmanDecoder.decode`.
    :returns: Decoded text.
    :rtype: str
    :raises FormatError: If the buffer is malformed.
    """
    return HuffmanDecoder().decode(data, strict=strict)
