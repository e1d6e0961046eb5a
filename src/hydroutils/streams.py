"""
Stream buffering and delay helpers.
"""

import asyncio
import inspect
import io
import logging
from typing import Any

from hydroutils.common.constants import StreamConstants

logger = logging.getLogger(__name__)


async def stream_to_buffer(stream: Any) -> bytes:
    """
    Read a whole byte stream into memory.

    Accepts, in order of preference:
    - an async iterable of chunks (e.g. ``asyncio.StreamReader``)
    - an object with a sync or async ``read(n)`` (e.g. ``io.BytesIO``)
    - a plain iterable of chunks

    Args:
        stream: Source of bytes-like chunks

    Returns:
        Concatenated bytes

    Raises:
        Whatever the stream raises while being consumed.
    """
    chunks = []
    if hasattr(stream, "__aiter__"):
        async for chunk in stream:
            chunks.append(chunk)
    elif hasattr(stream, "read"):
        while True:
            data = stream.read(StreamConstants.READ_CHUNK_SIZE)
            if inspect.isawaitable(data):
                data = await data
            if not data:
                break
            chunks.append(data)
    else:
        for chunk in stream:
            chunks.append(chunk)

    buffer = b"".join(chunks)
    logger.debug(f"Buffered {len(buffer)} bytes from {len(chunks)} chunks")
    return buffer


def buffer_to_stream(buffer: bytes) -> io.BytesIO:
    """Wrap bytes in a readable and writable in-memory stream positioned at 0."""
    return io.BytesIO(buffer)


async def sleep(timeout: float) -> None:
    """Wait for ``timeout`` milliseconds."""
    await asyncio.sleep(timeout / 1000)
