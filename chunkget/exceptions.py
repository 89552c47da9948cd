"""Custom exception classes for the chunkget command."""


class ChunkTermError(Exception):
    """
    Base exception class for all chunkget errors.
    """
    pass


class MissingNodeIdError(ChunkTermError):
    """
    Raised when a local id is given without the node id it belongs to.
    """

    def __init__(self, message: str = "No nid specified"):
        super().__init__(message)


class MissingLocalIdError(ChunkTermError):
    """
    Raised when a node id is given without a local id.
    """

    def __init__(self, message: str = "No lid specified"):
        super().__init__(message)


class MissingChunkIdError(ChunkTermError):
    """
    Raised when no chunk id (and no nid/lid pair) can be found in the arguments.
    """

    def __init__(self, message: str = "No cid or nid|lid specified"):
        super().__init__(message)


class InvalidArgumentError(ChunkTermError):
    """
    Raised when an argument has a type or value the command cannot use.
    """
    pass


class ChunkFetchFailedError(ChunkTermError):
    """
    Raised when the peer did not return exactly one chunk.
    """
    pass


class DataStructureFetchFailedError(ChunkTermError):
    """
    Raised when the peer could not load a chunk into the named data structure.
    """
    pass


class UnsupportedElementTypeError(ChunkTermError):
    """
    Raised when the requested element type is not one the decoder knows.
    """

    def __init__(self, element_type: str):
        super().__init__(f"Unsupported data type {element_type}")
        self.element_type = element_type


class PeerUnavailableError(ChunkTermError):
    """
    Raised when the storage peer is unreachable after all retries.
    """
    pass


class PeerProtocolError(ChunkTermError):
    """
    Raised when the storage peer answers with a message that cannot be decoded.
    """
    pass
