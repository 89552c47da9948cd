"""Tests for byte range clamping."""

import pytest

from chunkget.models import Window
from chunkget.window import clamp_window


def test_defaults_cover_whole_chunk():
    assert clamp_window(8) == Window(offset=0, length=8)


def test_length_larger_than_chunk_is_cut():
    assert clamp_window(8, offset=0, length=100) == Window(offset=0, length=8)


def test_range_running_past_end_is_cut():
    assert clamp_window(8, offset=3, length=6) == Window(offset=3, length=5)


def test_offset_to_end():
    assert clamp_window(12, offset=7) == Window(offset=7, length=5)


def test_range_inside_chunk_is_kept():
    assert clamp_window(10, offset=5, length=3) == Window(offset=5, length=3)


def test_offset_beyond_chunk_collapses_to_empty_window():
    """Size 4, offset 10, length 2 -> offset pulled back to 4, length cut to 0."""
    window = clamp_window(4, offset=10, length=2)

    assert window == Window(offset=4, length=0)
    assert window.end == 4


def test_empty_chunk():
    assert clamp_window(0, offset=3, length=None) == Window(offset=0, length=0)


@pytest.mark.parametrize("size", [0, 1, 4, 7, 8])
def test_clamp_bounds_and_idempotence(size):
    """Every result lies inside the chunk and clamping it again changes nothing."""
    for offset in range(0, 12):
        for length in [None] + list(range(0, 12)):
            window = clamp_window(size, offset, length)

            assert 0 <= window.offset <= window.end <= size
            assert window.length >= 0
            assert clamp_window(size, window.offset, window.length) == window
