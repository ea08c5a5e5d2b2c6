"""Reassembly of server-sent event streams into typed chunks.

Only ``data: `` lines carry payloads; every other line is ignored. A
``[DONE]`` payload ends the stream, and so does the end of the body: a
stream that never sends the sentinel still completes successfully.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncGenerator, AsyncIterable, AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from typing import TypeVar

import structlog
from pydantic import BaseModel

from jina_client.errors import DecodingError
from jina_client.transport import decode_body

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"

ChunkT = TypeVar("ChunkT", bound=BaseModel)
ChunkCallback = Callable[[ChunkT], Awaitable[None] | None]


async def iter_payloads(lines: AsyncIterable[str]) -> AsyncIterator[str]:
    """Yield the payload of each ``data: `` line until ``[DONE]`` or end of input."""
    async for line in lines:
        if not line.startswith(DATA_PREFIX):
            continue
        payload = line[len(DATA_PREFIX):]
        if payload == DONE_SENTINEL:
            return
        yield payload


async def iter_chunks(lines: AsyncIterable[str], model: type[ChunkT], *, call: str) -> AsyncIterator[ChunkT]:
    """Decode each payload as ``model``, in wire order.

    Raises DecodingError on the first payload that does not decode; nothing
    is yielded for it.
    """
    count = 0
    async for payload in iter_payloads(lines):
        count += 1
        try:
            chunk = decode_body(call, model, payload, what=f"chunk {count}")
        except DecodingError:
            logger.warning("jina_stream_chunk_invalid", call=call, chunk_number=count)
            raise
        yield chunk

    logger.debug("jina_stream_complete", call=call, total_chunks_received=count)


async def dispatch(chunks: AsyncGenerator[ChunkT, None], callback: ChunkCallback[ChunkT]) -> None:
    """Pass every chunk to ``callback``, sync or async, on the calling task.

    An exception raised by the callback stops the stream and propagates
    unchanged.
    """
    async with aclosing(chunks):
        async for chunk in chunks:
            result = callback(chunk)
            if inspect.isawaitable(result):
                await result
