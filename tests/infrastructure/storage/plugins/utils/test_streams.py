"""Tests for stream helpers."""

import pytest

from sqlitekv.core.exceptions import ValidationError
from sqlitekv.infrastructure.storage.plugins.utils import (
    collect_chunks,
    collect_chunks_sync,
    iter_single_chunk,
    single_chunk_stream,
)


@pytest.mark.asyncio
async def test_single_chunk_stream_yields_once():
    """Test the async stream yields the value once then ends."""
    stream = single_chunk_stream({"a": 1})

    assert [chunk async for chunk in stream] == [{"a": 1}]
    assert [chunk async for chunk in stream] == []


def test_iter_single_chunk_yields_once():
    """Test the sync stream yields the value once then ends."""
    stream = iter_single_chunk(b"data")

    assert next(stream) == b"data"
    with pytest.raises(StopIteration):
        next(stream)


@pytest.mark.asyncio
async def test_collect_chunks_from_async_source():
    """Test async chunks are joined in arrival order."""

    async def source():
        for chunk in (b"1", b"22", b"", b"333"):
            yield chunk

    assert await collect_chunks(source()) == b"122333"


@pytest.mark.asyncio
async def test_collect_chunks_from_plain_iterable():
    """Test plain iterables are accepted by the async collector."""
    assert await collect_chunks([b"a", memoryview(b"b")]) == b"ab"


@pytest.mark.asyncio
async def test_collect_chunks_empty_source():
    """Test an empty source produces an empty buffer."""
    assert await collect_chunks([]) == b""


def test_collect_chunks_sync_rejects_text():
    """Test text chunks are rejected."""
    assert collect_chunks_sync([b"x", bytearray(b"y")]) == b"xy"
    with pytest.raises(ValidationError):
        collect_chunks_sync([b"x", "y"])
