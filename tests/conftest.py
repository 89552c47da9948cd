"""Shared pytest fixtures for all tests."""

import pytest

from cli.config import Config
from cli.output import BufferedSink
from common.chunk_id import get_chunk_id
from common.types import ChunkPayload, DataStructure


class FakeStorage:
    """
    In-memory stand-in for the storage peer.

    Records every call so tests can check which collaborator calls were made.
    """

    def __init__(self, chunks=None, data_structures=None, success_count=None):
        self.chunks = dict(chunks or {})
        self.data_structures = dict(data_structures or {})
        self.success_count = success_count
        self.combine_calls = []
        self.get_chunks_calls = []
        self.get_data_structure_calls = []

    def combine_identifier(self, node_id, local_id):
        self.combine_calls.append((node_id, local_id))
        return get_chunk_id(node_id, local_id)

    def get_chunks(self, chunk_ids):
        self.get_chunks_calls.append(list(chunk_ids))
        payloads = [
            ChunkPayload(chunk_id=chunk_id, data=self.chunks[chunk_id], size=len(self.chunks[chunk_id]))
            for chunk_id in chunk_ids
            if chunk_id in self.chunks
        ]
        count = len(payloads) if self.success_count is None else self.success_count
        return count, payloads

    def get_data_structure(self, chunk_id, type_name):
        self.get_data_structure_calls.append((chunk_id, type_name))
        return self.data_structures.get((chunk_id, type_name))

    @property
    def network_calls(self):
        return len(self.get_chunks_calls) + len(self.get_data_structure_calls)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .chunkterm directory
    """
    config_dir = tmp_path / '.chunkterm'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sink():
    """Output sink that keeps printed lines in memory."""
    return BufferedSink()


@pytest.fixture
def chunk_id():
    """Chunk id of the sample chunk (nid 0x1, lid 0x2a)."""
    return get_chunk_id(0x1, 0x2a)


@pytest.fixture
def storage(chunk_id):
    """
    FakeStorage holding one 8-byte chunk and one data structure for it.

    Chunk bytes: 01 02 03 04 ff fe fd fc
    """
    return FakeStorage(
        chunks={chunk_id: bytes([0x01, 0x02, 0x03, 0x04, 0xff, 0xfe, 0xfd, 0xfc])},
        data_structures={
            (chunk_id, 'Vertex'): DataStructure(
                type_name='Vertex',
                size=16,
                fields={'id': 42, 'neighbours': [1, 2]},
            )
        },
    )


@pytest.fixture
def make_storage():
    """Factory for FakeStorage instances with custom chunks."""
    return FakeStorage
