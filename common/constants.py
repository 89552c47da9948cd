"""Project-wide constants (e.g., default peer port, RPC timeouts, chunk id layout)."""

DEFAULT_PEER_HOST: str = "localhost"
DEFAULT_PEER_PORT: int = 22222

CHUNK_SERVICE_NAME: str = "chunkterm.ChunkService"

PEER_TIMEOUT_SECONDS: int = 10
GRPC_KEEPALIVE_TIME_MS: int = 30000
GRPC_KEEPALIVE_TIMEOUT_MS: int = 10000

NODE_ID_BITS: int = 16
LOCAL_ID_BITS: int = 48
