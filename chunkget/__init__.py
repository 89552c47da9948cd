"""Chunk inspection core: resolve a chunk reference, fetch it, decode a window of it."""
