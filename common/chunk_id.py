"""Chunk id layout used by the storage cluster.

A chunk id is an unsigned 64-bit value: the upper 16 bits carry the id of the
node that created the chunk, the lower 48 bits the node-local id.
"""

from common.constants import LOCAL_ID_BITS, NODE_ID_BITS

NODE_ID_MASK = (1 << NODE_ID_BITS) - 1
LOCAL_ID_MASK = (1 << LOCAL_ID_BITS) - 1


def get_chunk_id(node_id: int, local_id: int) -> int:
    """
    Build a full chunk id from a node id and a local id.

    Args:
        node_id: Id of the node hosting the chunk
        local_id: Node-local id of the chunk

    Returns:
        Combined 64-bit chunk id
    """
    return ((node_id & NODE_ID_MASK) << LOCAL_ID_BITS) | (local_id & LOCAL_ID_MASK)


def to_hex_string(chunk_id: int) -> str:
    """Format a chunk id the way the terminal prints it, e.g. 0x1000000000001."""
    return f"0x{chunk_id & 0xFFFFFFFFFFFFFFFF:X}"
