import pytest

from bitops import BitReader
from errors import TruncatedInput


def test_bits_are_msb_first():
    br = BitReader(bytes([0b10100000, 0b00000001]), 16)
    assert [br.get(i) for i in range(4)] == [True, False, True, False]
    assert br.get(15) is True
    assert br.get(8) is False


def test_length_excludes_padding():
    br = BitReader(b"\xff", 3)
    assert br.length() == 3
    assert len(br) == 3
    with pytest.raises(IndexError):
        _ = br.get(3)


def test_negative_index_rejected():
    with pytest.raises(IndexError):
        _ = BitReader(b"\xff", 8).get(-1)


def test_zero_bits_over_empty_buffer():
    br = BitReader(b"", 0)
    assert len(br) == 0


def test_bit_count_beyond_buffer_raises():
    with pytest.raises(TruncatedInput):
        _ = BitReader(b"\x00\x00", 17)


def test_negative_bit_count_raises():
    with pytest.raises(ValueError):
        _ = BitReader(b"\x00", -1)
