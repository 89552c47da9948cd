"""Shared RPC/protocol message definitions (serialization formats)."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
import base64


@dataclass
class ChunkData:
    """A single chunk carried in a GetChunks response."""
    chunk_id: int
    size: int
    data: bytes

    def to_dict(self) -> dict:
        return {
            'chunk_id': self.chunk_id,
            'size': self.size,
            'data': base64.b64encode(self.data).decode('ascii')
        }

    @classmethod
    def from_dict(cls, obj: dict) -> 'ChunkData':
        data = base64.b64decode(obj.get('data', ''))
        return cls(chunk_id=obj['chunk_id'], size=obj.get('size', len(data)), data=data)


@dataclass
class GetChunksRequest:
    """Request message for GetChunks RPC."""
    chunk_ids: List[int]

    def to_json(self) -> bytes:
        """Serialize to JSON bytes."""
        return json.dumps({'chunk_ids': self.chunk_ids}).encode('utf-8')

    @classmethod
    def from_json(cls, data: bytes) -> 'GetChunksRequest':
        """Deserialize from JSON bytes."""
        obj = json.loads(data)
        return cls(chunk_ids=list(obj['chunk_ids']))


@dataclass
class GetChunksResponse:
    """Response message for GetChunks RPC."""
    success_count: int
    chunks: List[ChunkData] = field(default_factory=list)

    def to_json(self) -> bytes:
        """Serialize to JSON bytes."""
        return json.dumps({
            'success_count': self.success_count,
            'chunks': [chunk.to_dict() for chunk in self.chunks]
        }).encode('utf-8')

    @classmethod
    def from_json(cls, data: bytes) -> 'GetChunksResponse':
        """Deserialize from JSON bytes."""
        obj = json.loads(data)
        return cls(
            success_count=obj['success_count'],
            chunks=[ChunkData.from_dict(chunk) for chunk in obj.get('chunks', [])]
        )


@dataclass
class GetDataStructureRequest:
    """Request message for GetDataStructure RPC."""
    chunk_id: int
    type_name: str

    def to_json(self) -> bytes:
        """Serialize to JSON bytes."""
        return json.dumps({'chunk_id': self.chunk_id, 'type_name': self.type_name}).encode('utf-8')

    @classmethod
    def from_json(cls, data: bytes) -> 'GetDataStructureRequest':
        """Deserialize from JSON bytes."""
        obj = json.loads(data)
        return cls(chunk_id=obj['chunk_id'], type_name=obj['type_name'])


@dataclass
class GetDataStructureResponse:
    """Response message for GetDataStructure RPC."""
    success: bool
    type_name: Optional[str] = None
    size: int = 0
    fields: Dict[str, Any] = field(default_factory=dict)
    error_message: Optional[str] = None

    def to_json(self) -> bytes:
        """Serialize to JSON bytes."""
        return json.dumps({
            'success': self.success,
            'type_name': self.type_name,
            'size': self.size,
            'fields': self.fields,
            'error_message': self.error_message
        }).encode('utf-8')

    @classmethod
    def from_json(cls, data: bytes) -> 'GetDataStructureResponse':
        """Deserialize from JSON bytes."""
        obj = json.loads(data)
        return cls(
            success=obj['success'],
            type_name=obj.get('type_name'),
            size=obj.get('size', 0),
            fields=obj.get('fields') or {},
            error_message=obj.get('error_message')
        )
