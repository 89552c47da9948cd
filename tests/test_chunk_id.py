"""Tests for chunk id composition and formatting."""

from common.chunk_id import get_chunk_id, to_hex_string


def test_node_id_goes_to_upper_16_bits():
    assert get_chunk_id(1, 1) == 0x0001000000000001
    assert get_chunk_id(0xFFFF, 0) == 0xFFFF000000000000


def test_local_id_is_masked_to_48_bits():
    assert get_chunk_id(1, 1 << 48) == get_chunk_id(1, 0)


def test_hex_string_is_uppercase_without_padding():
    assert to_hex_string(get_chunk_id(1, 0x2a)) == "0x100000000002A"
    assert to_hex_string(0) == "0x0"
