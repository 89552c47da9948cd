"""Render a window of chunk bytes as text.

Integer elements are read with struct (big-endian unless configured otherwise)
and printed as zero-padded lowercase hex of their unsigned bit pattern, or as
signed decimal. The string type prints the whole window as Latin-1 text.
"""

import struct
from dataclasses import dataclass
from typing import List, Optional, Tuple

from chunkget.exceptions import InvalidArgumentError, UnsupportedElementTypeError
from chunkget.models import Window

STRING_TYPE = "string"
STRING_ALIASES = ("string", "str")

# name -> (width in bytes, struct format char for the signed value)
ELEMENT_FORMATS = {
    "byte": (1, "b"),
    "short": (2, "h"),
    "int": (4, "i"),
    "long": (8, "q"),
}

ELEMENT_TYPES = ("byte", "short", "int", "long", STRING_TYPE)

BYTE_ORDER_PREFIXES = {
    "big": ">",
    "little": "<",
}


@dataclass(frozen=True)
class ByteCursor:
    """Read position over an immutable byte view. Reading returns a new cursor."""

    view: bytes
    position: int = 0

    @property
    def remaining(self) -> int:
        return len(self.view) - self.position

    def read(self, count: int) -> Tuple[bytes, "ByteCursor"]:
        end = self.position + count
        return self.view[self.position:end], ByteCursor(self.view, end)


def normalize_element_type(element_type: Optional[str]) -> str:
    """
    Lower-case an element type name and map aliases to their canonical name.

    Raises:
        UnsupportedElementTypeError: If the name is not a known element type
    """
    if element_type is None:
        return STRING_TYPE

    name = element_type.strip().lower()
    if name in STRING_ALIASES:
        return STRING_TYPE
    if name not in ELEMENT_FORMATS:
        raise UnsupportedElementTypeError(element_type)
    return name


def decode_window(
    data: bytes,
    window: Window,
    element_type: Optional[str] = STRING_TYPE,
    hex: bool = True,
    byte_order: str = "big",
) -> Tuple[str, int]:
    """
    Decode the bytes of `window` into display text.

    Elements are read from the start of the window; trailing bytes too short
    for a whole element are not printed.

    Args:
        data: Chunk bytes
        window: Clamped range to decode
        element_type: byte, short, int, long or string (str)
        hex: Print integers as hex instead of signed decimal
        byte_order: 'big' or 'little'

    Returns:
        Tuple of (text, number of elements rendered)

    Raises:
        UnsupportedElementTypeError: If element_type is unknown
        InvalidArgumentError: If byte_order is unknown
    """
    name = normalize_element_type(element_type)

    prefix = BYTE_ORDER_PREFIXES.get(byte_order)
    if prefix is None:
        raise InvalidArgumentError(f"Unsupported byte order {byte_order}")

    view = bytes(data[window.offset:window.end])

    if name == STRING_TYPE:
        return view.decode("latin-1"), 1 if view else 0

    width, code = ELEMENT_FORMATS[name]
    element = struct.Struct(prefix + code)
    mask = (1 << (8 * width)) - 1

    tokens: List[str] = []
    cursor = ByteCursor(view)
    while cursor.remaining >= width:
        raw, cursor = cursor.read(width)
        value = element.unpack(raw)[0]
        if hex:
            tokens.append(f"{value & mask:0{2 * width}x}")
        else:
            tokens.append(str(value))

    return " ".join(tokens), len(tokens)
