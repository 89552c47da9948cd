"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

import grpc

from common.logging_config import get_logger, set_peer_target
from chunkget.command import OutputSink, execute_call
from chunkget.dispatcher import parse_call, parse_keyword_call
from chunkget.exceptions import ChunkTermError
from chunkget.models import RenderedOutput
from cli.config import Config
from cli.models import ChunkGetCommand, PeerCommand
from cli.output import ConsoleSink
from cli.peer_client import PeerClient

logger = get_logger(__name__)


_config: Optional[Config] = None
_client: Optional[PeerClient] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config loaded from ~/.chunkterm/config.json
    """
    global _config
    if _config is None:
        _config = Config(Path.home() / '.chunkterm' / 'config.json')
    return _config


def get_client() -> PeerClient:
    """
    Get or create global PeerClient instance.

    Returns:
        PeerClient instance
    """
    global _client
    if _client is None:
        logger.debug("Creating new PeerClient instance")
        _client = PeerClient(get_config())
    return _client


def reset_client() -> None:
    """Close the global PeerClient so the next command reconnects."""
    global _client
    if _client is not None:
        _client.close()
        _client = None


def handle_chunkget(
    cmd: ChunkGetCommand,
    client: Optional[PeerClient] = None,
    sink: Optional[OutputSink] = None,
    byte_order: Optional[str] = None,
) -> Optional[RenderedOutput]:
    """
    Handle 'chunkget' command.

    Any failure is reported as a single error line on the sink.

    Args:
        cmd: ChunkGetCommand with positional args or name=value options
        client: Optional PeerClient for dependency injection (testing)
        sink: Optional output sink (defaults to the console)
        byte_order: Optional byte order override (defaults to config)

    Returns:
        RenderedOutput of a raw decode, None for data structures and failures
    """
    if sink is None:
        sink = ConsoleSink()

    try:
        if cmd.options:
            call = parse_keyword_call(dict(cmd.options))
        else:
            call = parse_call(cmd.args)

        if client is None:
            client = get_client()
        if byte_order is None:
            byte_order = get_config().get_byte_order()

        return execute_call(call, client, sink, byte_order=byte_order)
    except ChunkTermError as e:
        logger.info(f"chunkget failed: {type(e).__name__}: {e}")
        sink.println_err(str(e))
        return None
    except grpc.RpcError as e:
        logger.error(f"chunkget peer call failed: {e}")
        sink.println_err(f"Peer error: {e.code().name} {e.details()}")
        return None


def handle_peer(cmd: PeerCommand, config: Optional[Config] = None) -> str:
    """
    Handle 'peer' command.

    Args:
        cmd: PeerCommand, with host and port to switch peers
        config: Optional Config for dependency injection (testing)

    Returns:
        Current or new peer address
    """
    if config is None:
        config = get_config()

    if cmd.host is None:
        return f"Peer: {config.get_peer_target()}"

    config.set_peer(cmd.host, cmd.port)
    reset_client()
    set_peer_target(get_logger('cli'), config.get_peer_target())
    logger.info(f"Switched peer to {config.get_peer_target()}")
    return f"Peer set to {config.get_peer_target()}"
