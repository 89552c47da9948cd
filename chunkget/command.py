"""Run a parsed chunkget call against a storage peer and print the result."""

from typing import List, Optional, Protocol, Tuple

from common.chunk_id import to_hex_string
from common.logging_config import get_logger
from common.types import ChunkPayload, DataStructure
from chunkget.decoder import decode_window, normalize_element_type
from chunkget.exceptions import DataStructureFetchFailedError
from chunkget.fetcher import fetch_chunk
from chunkget.models import ChunkGetCall, ClassFetchCall, RawDecodeCall, RenderedOutput
from chunkget.resolver import resolve_chunk_id
from chunkget.window import clamp_window

logger = get_logger(__name__)


class StorageCollaborator(Protocol):
    def combine_identifier(self, node_id: int, local_id: int) -> int: ...

    def get_chunks(self, chunk_ids: List[int]) -> Tuple[int, List[ChunkPayload]]: ...

    def get_data_structure(self, chunk_id: int, type_name: str) -> Optional[DataStructure]: ...


class OutputSink(Protocol):
    def println(self, text: str) -> None: ...

    def println_err(self, text: str) -> None: ...


def execute_call(
    call: ChunkGetCall,
    storage: StorageCollaborator,
    sink: OutputSink,
    byte_order: str = "big",
) -> Optional[RenderedOutput]:
    """
    Resolve, fetch and print one chunkget call.

    Errors are raised as ChunkTermError subclasses; nothing is printed for a
    call that fails.

    Args:
        call: Parsed call from the dispatcher
        storage: Storage collaborator (peer client)
        sink: Where result lines go
        byte_order: Byte order used for multi-byte elements

    Returns:
        RenderedOutput for raw decodes, None for data structure loads
    """
    chunk_id = resolve_chunk_id(call.target, storage)

    if isinstance(call, ClassFetchCall):
        _print_data_structure(chunk_id, call.type_name, storage, sink)
        return None

    return _print_raw(chunk_id, call, storage, sink, byte_order)


def _print_data_structure(
    chunk_id: int,
    type_name: str,
    storage: StorageCollaborator,
    sink: OutputSink,
) -> None:
    data_structure = storage.get_data_structure(chunk_id, type_name)
    if data_structure is None:
        raise DataStructureFetchFailedError(
            f"Getting data structure {type_name} {to_hex_string(chunk_id)} failed."
        )

    sink.println(f"DataStructure {type_name} (size {data_structure.size}): ")
    sink.println(str(data_structure))


def _print_raw(
    chunk_id: int,
    call: RawDecodeCall,
    storage: StorageCollaborator,
    sink: OutputSink,
    byte_order: str,
) -> RenderedOutput:
    request = call.request
    # reject unknown types before going to the network
    element_type = normalize_element_type(request.element_type)

    payload = fetch_chunk(storage, chunk_id)
    window = clamp_window(payload.size, request.offset, request.length)
    text, count = decode_window(payload.data, window, element_type, request.hex, byte_order)

    output = RenderedOutput(chunk_id=chunk_id, text=text, size=payload.size, element_count=count)
    logger.info(f"Decoded {count} {element_type} element(s) of {to_hex_string(chunk_id)} [{window.offset}, {window.end})")

    sink.println(f"Chunk data of {to_hex_string(chunk_id)} (chunksize {output.size}):")
    sink.println(output.text)
    return output
