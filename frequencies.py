from typing import Dict, NamedTuple, Tuple

from errors import TruncatedInput
from layout import Buffer, read

FrequencyTable = Dict[str, int]


class Header(NamedTuple):
    """Three u32 fields opening the buffer.

    :ivar total_size: Size of the whole encoded buffer (informational).
    :ivar reserved: Unused field, zero in known inputs.
    :ivar symbol_count: Number of frequency records that follow.
    """

    total_size: int
    reserved: int
    symbol_count: int


class BitHeader(NamedTuple):
    """Three u32 fields preceding the packed payload.

    :ivar packed_bits: Number of meaningful bits in the payload.
    :ivar packed_bytes: Payload length in bytes (informational).
    :ivar symbol_total: Number of symbols encoded (informational).
    """

    packed_bits: int
    packed_bytes: int
    symbol_total: int


def read_header(buffer: Buffer) -> Tuple[Header, memoryview]:
    values, rest = read(buffer, "3I")
    return Header(*values), rest


def read_bit_header(buffer: Buffer) -> Tuple[BitHeader, memoryview]:
    values, rest = read(buffer, "3I")
    return BitHeader(*values), rest


def parse_frequencies(
    buffer: Buffer,
) -> Tuple[FrequencyTable, Header, memoryview]:
    """Parse the header and the ``(frequency, symbol)`` records after it.

    Each record is ``[u32 frequency][u8 symbol][3 bytes padding]``. Symbols
    keep the order they first appear in; a repeated symbol overwrites the
    earlier frequency.

    :param buffer: Encoded buffer, starting at the header.
    :type buffer: bytes | bytearray | memoryview
    :returns: Tuple ``(table, header, remainder)``.
    :rtype: Tuple[Dict[str, int], Header, memoryview]
    :raises TruncatedInput: If the buffer ends before all records are read.
    """
    header, rest = read_header(buffer)
    table: FrequencyTable = {}
    for index in range(header.symbol_count):
        try:
            (freq,), rest = read(rest, "I")
            (char,), rest = read(rest, "c3x")
        except TruncatedInput as e:
            raise TruncatedInput(
                f"Frequency table ends at record {index} "
                f"of {header.symbol_count}"
            ) from e
        table[char.decode("latin-1")] = freq
    return table, header, rest
