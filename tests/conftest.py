import struct
import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

REFERENCE_HEX = (
    "81000000000000000B000000060000002D0000000900000030000000030000003100"
    "00000300000032000000020000003300000002000000340000000600000035000000"
    "030000003700000004000000380000000100000039000000020000007C0000008500"
    "00001100000029000000D30C7890FB1D0E6E4B4C35DF1775BDAA90"
)
REFERENCE_TEXT = "53801-198-55428-4050|53802-0-17725-70000|"


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


@pytest.fixture()
def reference_hex():
    return REFERENCE_HEX


@pytest.fixture()
def reference_buffer():
    """Known-good encoded buffer together with its decoded text."""
    return bytes.fromhex(REFERENCE_HEX), REFERENCE_TEXT


def make_buffer(pairs, payload=b"", nbits=None, symbol_total=0, total=None):
    """Assemble an encoded buffer.

    :param pairs: ``(symbol, frequency)`` records in table order.
    :param payload: Packed bitstream bytes.
    :param nbits: Declared bit count (default: every payload bit).
    :param symbol_total: Value for the informational symbol count field.
    :param total: Value for the size field (default: actual size).
    """
    body = b""
    for symbol, freq in pairs:
        body += struct.pack("<Ic3x", freq, symbol.encode("latin-1"))
    if nbits is None:
        nbits = len(payload) * 8
    body += struct.pack("<III", nbits, len(payload), symbol_total)
    body += payload
    size = 12 + len(body)
    return struct.pack(
        "<III", size if total is None else total, 0, len(pairs)
    ) + body


@pytest.fixture()
def make_buffer_fn():
    """Fixture that provides the make_buffer helper without importing conftest."""
    return make_buffer
