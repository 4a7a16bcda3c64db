"""
Stream helpers for storage plugins.

Values are small and fetched whole, so streaming is emulated:
- reads hand back a stream that yields the entire value exactly once
- writes drain the incoming stream into a single buffer
"""

from typing import Any, AsyncIterable, AsyncIterator, Iterable, Iterator, Union

from .serialization import to_bytes


async def single_chunk_stream(value: Any) -> AsyncIterator[Any]:
    """Yield ``value`` once, then end."""
    yield value


def iter_single_chunk(value: Any) -> Iterator[Any]:
    """Synchronous counterpart of ``single_chunk_stream``."""
    yield value


async def collect_chunks(source: Union[AsyncIterable[Any], Iterable[Any]]) -> bytes:
    """
    Drain a chunk source into one buffer.

    Args:
        source: Async iterable or plain iterable of bytes-like chunks

    Returns:
        Concatenation of all chunks in arrival order

    Raises:
        ValidationError: If a chunk is not bytes-like
    """
    chunks = []
    if hasattr(source, "__aiter__"):
        async for chunk in source:
            chunks.append(to_bytes(chunk))
    else:
        for chunk in source:
            chunks.append(to_bytes(chunk))
    return b"".join(chunks)


def collect_chunks_sync(source: Iterable[Any]) -> bytes:
    """Synchronous counterpart of ``collect_chunks``."""
    return b"".join(to_bytes(chunk) for chunk in source)
