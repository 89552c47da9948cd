"""gRPC client for reading chunks from a storage peer."""

import time
from typing import Callable, List, Optional, Tuple

import grpc

from common.chunk_id import get_chunk_id, to_hex_string
from common.constants import (
    CHUNK_SERVICE_NAME,
    GRPC_KEEPALIVE_TIME_MS,
    GRPC_KEEPALIVE_TIMEOUT_MS,
)
from common.logging_config import get_logger
from common.protocol import (
    GetChunksRequest,
    GetChunksResponse,
    GetDataStructureRequest,
    GetDataStructureResponse,
)
from common.types import ChunkPayload, DataStructure
from cli.config import Config
from chunkget.exceptions import PeerProtocolError, PeerUnavailableError

logger = get_logger(__name__)

TRANSIENT_CODES = (grpc.StatusCode.UNAVAILABLE, grpc.StatusCode.DEADLINE_EXCEEDED)


class PeerClient:
    """
    Blocking gRPC client for a storage peer's chunk service.
    Handles connection management, retries and message encoding.
    """

    def __init__(self, config: Config, channel: Optional[grpc.Channel] = None):
        """
        Initialize client with lazy connection.

        Args:
            config: Configuration instance
            channel: Optional pre-built channel (testing)
        """
        self.config = config
        self._target = config.get_peer_target()
        self._channel = channel

    def _ensure_channel(self) -> grpc.Channel:
        """Ensure gRPC channel is established."""
        if self._channel is None:
            options = [
                ('grpc.keepalive_time_ms', GRPC_KEEPALIVE_TIME_MS),
                ('grpc.keepalive_timeout_ms', GRPC_KEEPALIVE_TIMEOUT_MS),
                ('grpc.keepalive_permit_without_calls', 1),
            ]
            self._channel = grpc.insecure_channel(self._target, options=options)
            logger.info(f"Established gRPC channel to {self._target}")
        return self._channel

    def close(self) -> None:
        """Close gRPC channel."""
        if self._channel is not None:
            self._channel.close()
            self._channel = None

    def combine_identifier(self, node_id: int, local_id: int) -> int:
        """
        Build the full chunk id for a nid/lid pair.

        Args:
            node_id: Id of the peer hosting the chunk
            local_id: Local id of the chunk on that peer

        Returns:
            Full chunk id
        """
        return get_chunk_id(node_id, local_id)

    def get_chunks(self, chunk_ids: List[int]) -> Tuple[int, List[ChunkPayload]]:
        """
        Fetch chunks from the peer.

        Args:
            chunk_ids: Full ids of the chunks to fetch

        Returns:
            Tuple of (number of chunks fetched, fetched payloads)

        Raises:
            PeerUnavailableError: If the peer cannot be reached after retries
            PeerProtocolError: If the reply cannot be decoded
        """
        request = GetChunksRequest(chunk_ids=list(chunk_ids))

        try:
            response_bytes = self._call_with_retry('GetChunks', request.to_json())
        except grpc.RpcError as e:
            if e.code() == grpc.StatusCode.NOT_FOUND:
                logger.info(f"Peer reports chunk(s) not found: {_format_ids(chunk_ids)}")
                return 0, []
            logger.error(f"gRPC error getting chunk(s) {_format_ids(chunk_ids)}: {e}")
            raise

        response = _decode(GetChunksResponse, response_bytes, "GetChunks")
        payloads = [
            ChunkPayload(chunk_id=chunk.chunk_id, data=chunk.data, size=chunk.size)
            for chunk in response.chunks
        ]
        logger.debug(f"GetChunks {_format_ids(chunk_ids)}: success_count={response.success_count}")
        return response.success_count, payloads

    def get_data_structure(self, chunk_id: int, type_name: str) -> Optional[DataStructure]:
        """
        Ask the peer to load a chunk into the named data structure.

        Args:
            chunk_id: Full id of the chunk
            type_name: Name of the data structure type known to the peer

        Returns:
            DataStructure, or None if the peer could not create or fill it

        Raises:
            PeerUnavailableError: If the peer cannot be reached after retries
            PeerProtocolError: If the reply cannot be decoded
        """
        request = GetDataStructureRequest(chunk_id=chunk_id, type_name=type_name)

        try:
            response_bytes = self._call_with_retry('GetDataStructure', request.to_json())
        except grpc.RpcError as e:
            if e.code() == grpc.StatusCode.NOT_FOUND:
                logger.info(f"Peer reports chunk {to_hex_string(chunk_id)} not found")
                return None
            logger.error(f"gRPC error getting data structure {type_name} {to_hex_string(chunk_id)}: {e}")
            raise

        response = _decode(GetDataStructureResponse, response_bytes, "GetDataStructure")
        if not response.success:
            logger.warning(
                f"Peer failed to load {to_hex_string(chunk_id)} as {type_name}: {response.error_message}"
            )
            return None

        return DataStructure(
            type_name=response.type_name or type_name,
            size=response.size,
            fields=response.fields,
        )

    def _call_with_retry(self, method: str, payload: bytes) -> bytes:
        """
        Make a unary call, retrying with exponential backoff on transient failures.

        Args:
            method: RPC method name on the chunk service
            payload: Serialized request

        Returns:
            Serialized response

        Raises:
            PeerUnavailableError: If max retries exceeded
            grpc.RpcError: For non-transient RPC failures
        """
        retry_config = self.config.get_retry_config()
        max_retries = retry_config['max_retries']
        backoff = retry_config['retry_backoff_multiplier']

        multi_callable = self._unary(method)

        for attempt in range(max_retries + 1):
            try:
                return multi_callable(payload, timeout=self.config.get_timeout())
            except grpc.RpcError as e:
                if e.code() not in TRANSIENT_CODES:
                    raise

                if attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Transient failure (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} status={e.code().name}, retrying in {delay}s"
                    )
                    time.sleep(delay)
                    continue

                logger.error(f"Peer unavailable (max retries exceeded): {method} error={e.details()}")
                raise PeerUnavailableError(
                    f"Cannot reach storage peer at {self._target}. Is it running?"
                ) from e

        raise PeerUnavailableError("Max retries exceeded")

    def _unary(self, method: str) -> Callable[..., bytes]:
        return self._ensure_channel().unary_unary(
            f'/{CHUNK_SERVICE_NAME}/{method}',
            request_serializer=lambda x: x,
            response_deserializer=lambda x: x,
        )


def _format_ids(chunk_ids: List[int]) -> str:
    return ", ".join(to_hex_string(chunk_id) for chunk_id in chunk_ids)


def _decode(message_type, response_bytes: bytes, method: str):
    try:
        return message_type.from_json(response_bytes)
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error(f"Malformed {method} response from peer: {e}")
        raise PeerProtocolError(f"Malformed response from peer to {method}") from e
