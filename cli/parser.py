"""Command parser for CLI input."""

import re
import shlex
from typing import Any

from chunkget.dispatcher import KEYWORD_NAMES
from cli.models import ChunkGetCommand, CommandRequest, PeerCommand

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (ChunkGetCommand or PeerCommand)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "chunkget":
        return _parse_chunkget(tokens[1:])
    elif command_name == "peer":
        return _parse_peer(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def convert_value(token: str) -> Any:
    """
    Convert a token to the value type the terminal uses for it.

    Decimal integers become int, true/false become bool, null/none become
    None. Everything else, including hex like 0x1f, stays a string.
    """
    lowered = token.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none"):
        return None
    if INTEGER_PATTERN.match(token):
        return int(token)
    return token


def _parse_chunkget(args: list[str]) -> ChunkGetCommand:
    """Parse 'chunkget' positional or name=value arguments."""
    keywords = [arg for arg in args if _is_keyword(arg)]

    if not keywords:
        return ChunkGetCommand(args=tuple(convert_value(arg) for arg in args))

    if len(keywords) != len(args):
        raise ParseError("chunkget arguments must be either all positional or all name=value")

    options = {}
    for arg in args:
        name, _, value = arg.partition("=")
        name = name.lower()
        if name in options:
            raise ParseError(f"chunkget argument '{name}' given more than once")
        options[name] = convert_value(value)

    return ChunkGetCommand(options=tuple(options.items()))


def _is_keyword(arg: str) -> bool:
    name, separator, _ = arg.partition("=")
    return bool(separator) and name.lower() in KEYWORD_NAMES


def _parse_peer(args: list[str]) -> PeerCommand:
    """Parse 'peer [host port]' command."""
    if not args:
        return PeerCommand()

    if len(args) != 2:
        raise ParseError("peer requires either no arguments or exactly 2: <host> <port>")

    host, port = args
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ParseError(f"Invalid port: {port}")

    return PeerCommand(host=host, port=int(port))
