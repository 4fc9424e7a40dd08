from errors import TruncatedInput
from layout import Buffer


class BitReader:
    """Random-access view over the bits of a byte buffer.

    Bits are numbered MSB-first within each byte, so bit ``0`` is the high
    bit of byte ``0``. Only the first ``nbits`` bits are visible; the
    padding that fills out the last byte is never exposed.

    :ivar data: Source bytes.
    :type data: memoryview
    :ivar nbits: Number of readable bits.
    :type nbits: int
    """

    def __init__(self, data: Buffer, nbits: int):
        """Create a bit reader over ``data`` bounded to ``nbits`` bits.

        :param data: Source data to read from.
        :type data: bytes | bytearray | memoryview
        :param int nbits: Declared bit count.
        :returns: None
        :rtype: None
        :raises ValueError: If ``nbits`` is negative.
        :raises TruncatedInput: If ``data`` holds fewer than ``nbits`` bits.
        """
        if nbits < 0:
            raise ValueError(f"Negative bit count: {nbits}")
        self.data = memoryview(data)
        if nbits > len(self.data) * 8:
            raise TruncatedInput(
                f"Declared {nbits} bits but only "
                f"{len(self.data) * 8} are available"
            )
        self.nbits = nbits

    def __len__(self) -> int:
        return self.nbits

    def length(self) -> int:
        """Return the declared bit count.

        :rtype: int
        """
        return self.nbits

    def get(self, index: int) -> bool:
        """Return bit ``index``.

        :param int index: Bit position, ``0 <= index < nbits``.
        :returns: ``True`` for a set bit.
        :rtype: bool
        :raises IndexError: If ``index`` is outside the readable range.
        """
        if not 0 <= index < self.nbits:
            raise IndexError(f"Bit index {index} out of range")
        return bool((self.data[index >> 3] >> (7 - (index & 7))) & 1)
