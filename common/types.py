"""Shared data type definitions (ChunkPayload, DataStructure)."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class ChunkPayload:
    """
    Raw bytes of a single chunk as returned by a storage peer.

    `size` is the size the peer declared for the chunk.
    """
    chunk_id: int
    data: bytes
    size: int


@dataclass(frozen=True)
class DataStructure:
    """
    A chunk deserialized by the peer into a named data structure.
    """
    type_name: str
    size: int
    fields: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if not self.fields:
            return "(no fields)"
        width = max(len(name) for name in self.fields)
        return "\n".join(f"  {name.ljust(width)} = {value}" for name, value in self.fields.items())
