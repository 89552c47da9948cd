"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class ChunkGetCommand:
    """Get a chunk and print its data.

    Exactly one of `args` (positional values) and `options` (name=value pairs)
    is filled by the parser.
    """

    args: tuple[Any, ...] = ()
    options: tuple[tuple[str, Any], ...] = ()
    command: Literal["chunkget"] = "chunkget"


@dataclass(frozen=True)
class PeerCommand:
    """Show or change the storage peer the terminal talks to."""

    host: str | None = None
    port: int | None = None
    command: Literal["peer"] = "peer"


CommandRequest = ChunkGetCommand | PeerCommand
