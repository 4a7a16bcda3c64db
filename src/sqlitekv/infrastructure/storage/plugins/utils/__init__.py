"""
Utility functions for storage plugins.

This package provides common utility functions used across storage plugins:
- prep_key / is_binary_key: key namespacing and classification
- classify_value / encode_value / decode_value: stored value representation
- single_chunk_stream / collect_chunks: stream emulation over whole values
"""

from .keys import is_binary_key, prep_key
from .serialization import classify_value, decode_value, encode_value, to_bytes
from .streams import collect_chunks, collect_chunks_sync, iter_single_chunk, single_chunk_stream

__all__ = [
    "prep_key",
    "is_binary_key",
    "classify_value",
    "encode_value",
    "decode_value",
    "to_bytes",
    "single_chunk_stream",
    "iter_single_chunk",
    "collect_chunks",
    "collect_chunks_sync",
]
