"""Call shapes and value types for the chunkget command."""

from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

DEFAULT_ELEMENT_TYPE = "string"
DEFAULT_HEX = True
DEFAULT_OFFSET = 0


@dataclass(frozen=True)
class ChunkIdRef:
    """A chunk referenced by its full id (int, or hex text)."""

    value: Any


@dataclass(frozen=True)
class NodeLocalRef:
    """A chunk referenced by node id and node-local id."""

    node_id: Any
    local_id: Any


ChunkRef = Union[ChunkIdRef, NodeLocalRef]


@dataclass(frozen=True)
class DecodeRequest:
    """Options for a raw decode, with defaults already applied."""

    element_type: str = DEFAULT_ELEMENT_TYPE
    hex: bool = DEFAULT_HEX
    offset: int = DEFAULT_OFFSET
    length: Optional[int] = None


@dataclass(frozen=True)
class ClassFetchCall:
    """Load the chunk into a named data structure on the peer."""

    target: ChunkRef
    type_name: str
    kind: Literal["class"] = "class"


@dataclass(frozen=True)
class RawDecodeCall:
    """Fetch the chunk's bytes and decode a window of them."""

    target: ChunkRef
    request: DecodeRequest
    kind: Literal["raw"] = "raw"


ChunkGetCall = Union[ClassFetchCall, RawDecodeCall]


@dataclass(frozen=True)
class Window:
    """A [offset, offset + length) range inside a chunk payload."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class RenderedOutput:
    """Decoded chunk text plus the chunk's full size."""

    chunk_id: int
    text: str
    size: int
    element_count: int
