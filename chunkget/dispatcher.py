"""Map the chunkget argument list onto one explicit call shape.

Positional arguments are accepted in several legacy shapes:

    chunkget <cid:str> ...                 full chunk id given as hex text
    chunkget <nid> <lid> ...               nid/lid pair
    chunkget <cid>                         bare chunk id, defaults for the rest

followed by one of

    <class:str>                            load into a named data structure
    <type:str> [hex] [offset] [length]     raw decode, type first
    [offset] [length] [type] [hex]         raw decode, offset first

Which of the two raw orderings applies is decided only by whether the
argument after the chunk reference is a string. Both orderings are still
accepted by the terminal, so each gets its own entry point below.
"""

from typing import Any, Mapping, Sequence

from common.logging_config import get_logger
from chunkget.exceptions import (
    InvalidArgumentError,
    MissingChunkIdError,
    MissingLocalIdError,
    MissingNodeIdError,
)
from chunkget.models import (
    DEFAULT_ELEMENT_TYPE,
    DEFAULT_HEX,
    DEFAULT_OFFSET,
    ChunkGetCall,
    ChunkIdRef,
    ChunkRef,
    ClassFetchCall,
    DecodeRequest,
    NodeLocalRef,
    RawDecodeCall,
)

logger = get_logger(__name__)

KEYWORD_NAMES = ("cid", "nid", "lid", "offset", "length", "type", "hex", "class")
MAX_DECODE_ARGS = 4
DECODE_OPTION_NAMES = ("type", "hex", "offset", "length")


def parse_call(args: Sequence[Any]) -> ChunkGetCall:
    """
    Decide from argument count and types which chunkget call is meant.

    Args:
        args: Positional values (int, bool, str or None)

    Returns:
        ClassFetchCall or RawDecodeCall

    Raises:
        MissingChunkIdError: If no arguments were given
        InvalidArgumentError: If the trailing arguments do not fit the chosen shape
    """
    args = list(args)
    if not args:
        raise MissingChunkIdError()

    if isinstance(args[0], str):
        call = _route_chunk_ref(ChunkIdRef(args[0]), args[1:])
    elif len(args) > 1:
        call = _route_chunk_ref(NodeLocalRef(args[0], args[1]), args[2:])
    else:
        call = RawDecodeCall(target=ChunkIdRef(args[0]), request=DecodeRequest())

    logger.debug(f"Parsed chunkget arguments {args!r} as {call!r}")
    return call


def _route_chunk_ref(target: ChunkRef, trailing: Sequence[Any]) -> ChunkGetCall:
    if trailing and isinstance(trailing[0], str):
        if len(trailing) == 1:
            return ClassFetchCall(target=target, type_name=trailing[0])
        return RawDecodeCall(target=target, request=decode_request_type_first(*trailing))

    return RawDecodeCall(target=target, request=decode_request_offset_first(*trailing))


def decode_request_type_first(*args: Any) -> DecodeRequest:
    """Build a DecodeRequest from arguments ordered type, hex, offset, length."""
    _check_arg_count(args)
    element_type, hex, offset, length = _pad(args)
    return build_decode_request(element_type=element_type, hex=hex, offset=offset, length=length)


def decode_request_offset_first(*args: Any) -> DecodeRequest:
    """Build a DecodeRequest from arguments ordered offset, length, type, hex."""
    _check_arg_count(args)
    offset, length, element_type, hex = _pad(args)
    return build_decode_request(element_type=element_type, hex=hex, offset=offset, length=length)


def build_decode_request(
    element_type: Any = None,
    hex: Any = None,
    offset: Any = None,
    length: Any = None,
) -> DecodeRequest:
    """
    Validate raw decode options and apply defaults.

    The element type name itself is checked by the decoder.

    Raises:
        InvalidArgumentError: If a value has the wrong type or is negative
    """
    if element_type is None:
        element_type = DEFAULT_ELEMENT_TYPE
    elif not isinstance(element_type, str):
        raise InvalidArgumentError(f"Invalid type '{element_type}': expected a type name")

    return DecodeRequest(
        element_type=element_type,
        hex=_to_hex_flag(hex),
        offset=DEFAULT_OFFSET if offset is None else _to_size(offset, "offset"),
        length=None if length is None else _to_size(length, "length"),
    )


def parse_keyword_call(options: Mapping[str, Any]) -> ChunkGetCall:
    """
    Build a call from name=value arguments.

    A full cid wins over nid/lid. 'class' selects the data structure path,
    everything else goes to a raw decode.

    Raises:
        InvalidArgumentError: On unknown argument names, or on class combined with
            type, hex, offset or length
        MissingNodeIdError: If lid is given without nid
        MissingLocalIdError: If nid is given without lid
        MissingChunkIdError: If neither cid nor nid/lid are given
    """
    unknown = sorted(set(options) - set(KEYWORD_NAMES))
    if unknown:
        raise InvalidArgumentError(f"Unknown argument(s): {', '.join(unknown)}")

    if options.get("cid") is not None:
        target: ChunkRef = ChunkIdRef(options["cid"])
    elif options.get("lid") is not None:
        if options.get("nid") is None:
            raise MissingNodeIdError("error: missing nid for lid")
        target = NodeLocalRef(options["nid"], options["lid"])
    elif options.get("nid") is not None:
        raise MissingLocalIdError("error: missing lid for nid")
    else:
        raise MissingChunkIdError("No cid or nid/lid specified.")

    class_name = options.get("class")
    if class_name is not None:
        if not isinstance(class_name, str):
            raise InvalidArgumentError(f"Invalid class '{class_name}': expected a class name")
        decode_options = [name for name in DECODE_OPTION_NAMES if options.get(name) is not None]
        if decode_options:
            raise InvalidArgumentError(
                f"Cannot combine class with {', '.join(decode_options)}: a data structure is loaded whole"
            )
        return ClassFetchCall(target=target, type_name=class_name)

    request = build_decode_request(
        element_type=options.get("type"),
        hex=options.get("hex"),
        offset=options.get("offset"),
        length=options.get("length"),
    )
    return RawDecodeCall(target=target, request=request)


def _check_arg_count(args: Sequence[Any]) -> None:
    if len(args) > MAX_DECODE_ARGS:
        raise InvalidArgumentError(f"Too many arguments: {len(args)} decode options given, at most {MAX_DECODE_ARGS} allowed")


def _pad(args: Sequence[Any]) -> list:
    return list(args) + [None] * (MAX_DECODE_ARGS - len(args))


def _to_hex_flag(value: Any) -> bool:
    if value is None:
        return DEFAULT_HEX
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise InvalidArgumentError(f"Invalid hex flag '{value}': expected true or false")


def _to_size(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Invalid {name} '{value}': expected an integer")
    if value < 0:
        raise InvalidArgumentError(f"Invalid {name} '{value}': must not be negative")
    return value
