"""Tests for chunk reference resolution."""

import pytest

from chunkget.exceptions import (
    InvalidArgumentError,
    MissingChunkIdError,
    MissingLocalIdError,
    MissingNodeIdError,
)
from chunkget.fetcher import fetch_chunk
from chunkget.models import ChunkIdRef, NodeLocalRef
from chunkget.resolver import parse_chunk_id, resolve_chunk_id
from common.chunk_id import get_chunk_id


class TestNodeLocalRef:

    def test_combines_through_collaborator(self, storage):
        chunk_id = resolve_chunk_id(NodeLocalRef(1, 0x2a), storage)

        assert chunk_id == get_chunk_id(1, 0x2a)
        assert storage.combine_calls == [(1, 0x2a)]

    def test_missing_nid(self, storage):
        with pytest.raises(MissingNodeIdError):
            resolve_chunk_id(NodeLocalRef(None, 5), storage)
        assert storage.combine_calls == []

    def test_missing_lid(self, storage):
        with pytest.raises(MissingLocalIdError):
            resolve_chunk_id(NodeLocalRef(1, None), storage)
        assert storage.combine_calls == []

    def test_hex_text_ids(self, storage):
        assert resolve_chunk_id(NodeLocalRef("0x1", "2a"), storage) == get_chunk_id(1, 0x2a)

    def test_negative_id_rejected(self, storage):
        with pytest.raises(InvalidArgumentError):
            resolve_chunk_id(NodeLocalRef(-1, 5), storage)

    def test_resolved_fetch_equals_direct_fetch(self, make_storage):
        """Fetching via nid/lid gets the same chunk as fetching the combined id."""
        for node_id, local_id in [(1, 0x2a), (0, 0), (0xffff, 1 << 40)]:
            chunk_id = get_chunk_id(node_id, local_id)
            fake = make_storage(chunks={chunk_id: bytes([node_id & 0xff, 7])})

            via_pair = fetch_chunk(fake, resolve_chunk_id(NodeLocalRef(node_id, local_id), fake))
            direct = fetch_chunk(fake, chunk_id)

            assert via_pair == direct
            assert fake.get_chunks_calls == [[chunk_id], [chunk_id]]


class TestChunkIdRef:

    def test_int_passes_through(self, storage):
        assert resolve_chunk_id(ChunkIdRef(0x1000000000001), storage) == 0x1000000000001
        assert storage.combine_calls == []

    def test_missing_cid(self, storage):
        with pytest.raises(MissingChunkIdError):
            resolve_chunk_id(ChunkIdRef(None), storage)

    @pytest.mark.parametrize("text,expected", [
        ("0x1000000000001", 0x1000000000001),
        ("0X2A", 0x2a),
        ("ff", 0xff),
    ])
    def test_hex_text(self, storage, text, expected):
        assert resolve_chunk_id(ChunkIdRef(text), storage) == expected

    def test_bad_text(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_chunk_id("vertex")

        assert "vertex" in str(exc_info.value)

    def test_bool_is_not_an_id(self, storage):
        with pytest.raises(InvalidArgumentError):
            resolve_chunk_id(ChunkIdRef(True), storage)
