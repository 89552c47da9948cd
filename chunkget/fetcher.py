"""Fetch a single chunk from the storage peer."""

from typing import List, Protocol, Tuple

from common.chunk_id import to_hex_string
from common.logging_config import get_logger
from common.types import ChunkPayload
from chunkget.exceptions import ChunkFetchFailedError

logger = get_logger(__name__)


class ChunkSource(Protocol):
    def get_chunks(self, chunk_ids: List[int]) -> Tuple[int, List[ChunkPayload]]: ...


def fetch_chunk(source: ChunkSource, chunk_id: int) -> ChunkPayload:
    """
    Get exactly one chunk from the peer.

    Blocks for the duration of the peer call; timeouts and retries are the
    client's business.

    Args:
        source: Storage collaborator
        chunk_id: Full id of the chunk

    Returns:
        The chunk payload

    Raises:
        ChunkFetchFailedError: If the peer did not report exactly one fetched chunk
    """
    success_count, chunks = source.get_chunks([chunk_id])

    if success_count != 1 or not chunks:
        logger.info(f"Fetch of {to_hex_string(chunk_id)} returned {success_count} chunk(s)")
        raise ChunkFetchFailedError(f"Getting chunk {to_hex_string(chunk_id)} failed.")

    payload = chunks[0]
    logger.debug(f"Fetched chunk {to_hex_string(chunk_id)}, size={payload.size}")
    return payload
