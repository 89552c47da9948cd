"""Clamp a requested byte range to the bounds of a chunk."""

from typing import Optional

from common.logging_config import get_logger
from chunkget.models import Window

logger = get_logger(__name__)


def clamp_window(size: int, offset: int = 0, length: Optional[int] = None) -> Window:
    """
    Narrow [offset, offset + length) so it fits inside a chunk of `size` bytes.

    Out-of-range values are corrected, never rejected. The steps run in order
    and each one works on the result of the previous one:

    1. a missing length, or one larger than the chunk, becomes the chunk size
    2. an offset beyond the chunk is pulled back to the end (zero-width window)
    3. a range running past the end is cut at the end

    The result always satisfies 0 <= offset <= offset + length <= size, and
    clamping a clamped window returns it unchanged.

    Args:
        size: Declared size of the chunk in bytes
        offset: Requested start of the range
        length: Requested number of bytes, None for "up to the end"

    Returns:
        Clamped Window
    """
    requested = (offset, length)

    if length is None or length > size:
        length = size

    if offset > size:
        offset = size

    if offset + length > size:
        length = size - offset

    if requested != (offset, length):
        logger.debug(f"Clamped range offset={requested[0]} length={requested[1]} to [{offset}, {offset + length}) of {size}")

    return Window(offset=offset, length=length)
