import struct
from typing import Tuple, Union

from errors import TruncatedInput

Buffer = Union[bytes, bytearray, memoryview]


def read(buffer: Buffer, fmt: str) -> Tuple[tuple, memoryview]:
    """Unpack a little-endian ``fmt`` layout from the front of ``buffer``.

    The buffer is left untouched; the caller gets the decoded fields and a
    view over whatever follows them.

    :param buffer: Source bytes.
    :type buffer: bytes | bytearray | memoryview
    :param fmt: ``struct`` layout without byte-order prefix (e.g. ``"3I"``).
    :type fmt: str
    :returns: Tuple ``(values, remainder)``.
    :rtype: Tuple[tuple, memoryview]
    :raises TruncatedInput: If ``buffer`` is shorter than the layout.
    """
    layout = struct.Struct("<" + fmt)
    view = memoryview(buffer)
    if len(view) < layout.size:
        raise TruncatedInput(
            f"Need {layout.size} bytes for '{fmt}', got {len(view)}"
        )
    return layout.unpack_from(view), view[layout.size:]
