"""Turn a chunk reference (full id or nid/lid pair) into a single chunk id."""

from typing import Protocol

from common.chunk_id import to_hex_string
from common.logging_config import get_logger
from chunkget.exceptions import (
    InvalidArgumentError,
    MissingChunkIdError,
    MissingLocalIdError,
    MissingNodeIdError,
)
from chunkget.models import ChunkIdRef, ChunkRef, NodeLocalRef

logger = get_logger(__name__)


class IdentifierCombiner(Protocol):
    def combine_identifier(self, node_id: int, local_id: int) -> int: ...


def resolve_chunk_id(ref: ChunkRef, combiner: IdentifierCombiner) -> int:
    """
    Resolve a chunk reference to a full chunk id.

    Args:
        ref: ChunkIdRef or NodeLocalRef produced by the dispatcher
        combiner: Storage collaborator that knows the chunk id layout

    Returns:
        Full chunk id

    Raises:
        MissingNodeIdError: If a nid/lid reference has no nid
        MissingLocalIdError: If a nid/lid reference has no lid
        MissingChunkIdError: If a full reference has no value
        InvalidArgumentError: If an id is not a non-negative integer
    """
    if isinstance(ref, NodeLocalRef):
        if ref.node_id is None:
            raise MissingNodeIdError()
        if ref.local_id is None:
            raise MissingLocalIdError()

        node_id = _require_id(ref.node_id, "nid")
        local_id = _require_id(ref.local_id, "lid")
        chunk_id = combiner.combine_identifier(node_id, local_id)
        logger.debug(f"Resolved nid={node_id:#x} lid={local_id:#x} to {to_hex_string(chunk_id)}")
        return chunk_id

    if ref.value is None:
        raise MissingChunkIdError("No cid specified")

    if isinstance(ref.value, str):
        return parse_chunk_id(ref.value)

    return _require_id(ref.value, "cid")


def parse_chunk_id(text: str) -> int:
    """
    Parse a textual chunk id. Hex digits are expected, the 0x prefix is optional.

    Raises:
        InvalidArgumentError: If the text is not a hex number
    """
    return _parse_hex(text, "cid")


def _parse_hex(text: str, name: str) -> int:
    digits = text.strip()
    if digits.lower().startswith("0x"):
        digits = digits[2:]

    try:
        value = int(digits, 16)
    except ValueError:
        raise InvalidArgumentError(f"Invalid {name} '{text}': expected a hex number")

    if value < 0:
        raise InvalidArgumentError(f"Invalid {name} '{text}': must not be negative")
    return value


def _require_id(value, name: str) -> int:
    if isinstance(value, str):
        return _parse_hex(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Invalid {name} '{value}': expected an integer")
    if value < 0:
        raise InvalidArgumentError(f"Invalid {name} '{value}': must not be negative")
    return value
