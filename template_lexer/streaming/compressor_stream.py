"""
Compressor Stream: Compresses tokens pushed asynchronously.

This module provides a duplex channel: a producer writes raw tokens one at a
time and a consumer reads compressed tokens with ``async for``. The same
merge state as ``compress_tokens`` is applied incrementally.

Key Features:
- Bounded output buffer (writers suspend while the reader is behind)
- Writes processed in call order, even when scheduled concurrently
- Pending literal flushed on close, discarded on abort
- Abort errors surfaced unchanged to the reader
"""

import asyncio
import logging
from collections import deque
from typing import AsyncIterable, AsyncIterator, Deque, Optional

from ..coalescing import LiteralAccumulator
from ..config import get_settings
from ..errors import StreamAbortedError, StreamClosedError
from ..tokens import Token


logger = logging.getLogger(__name__)


class TokenCompressorStream:
    """
    Streams compressed tokens from tokens written one at a time.

    Example:
        >>> stream = TokenCompressorStream()
        >>> async def produce():
        ...     for token in tokens:
        ...         await stream.write(token)
        ...     await stream.close()
        >>> producer = asyncio.create_task(produce())
        >>> async for token in stream:
        ...     print(token)
        >>> await producer
    """

    def __init__(self, high_water_mark: Optional[int] = None):
        """
        Initialize the stream.

        Args:
            high_water_mark: Max compressed tokens buffered for the reader.
                If None, uses the configured default.
        """
        if high_water_mark is None:
            high_water_mark = get_settings().stream_high_water_mark
        if high_water_mark < 1:
            raise ValueError("high_water_mark must be at least 1")

        self.high_water_mark = high_water_mark
        self._accumulator = LiteralAccumulator()
        self._buffer: Deque[Token] = deque()
        self._changed = asyncio.Condition()
        self._write_lock = asyncio.Lock()
        self._closed = False
        self._done = False  # all output is in the buffer
        self._error: Optional[BaseException] = None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def aborted(self) -> bool:
        return self._error is not None

    # -------------------------------------------------------------------------
    # Write side
    # -------------------------------------------------------------------------

    def _check_writable(self) -> None:
        if self._error is not None:
            raise self._error
        if self._closed:
            raise StreamClosedError("stream is closed")

    async def _put(self, token: Token) -> None:
        """Append a final token, suspending while the buffer is full."""
        async with self._changed:
            await self._changed.wait_for(
                lambda: len(self._buffer) < self.high_water_mark or self._error is not None
            )
            if self._error is not None:
                raise self._error
            self._buffer.append(token)
            self._changed.notify_all()

    async def write(self, token: Token) -> None:
        """
        Write one raw token.

        Completes once every token this write finalized is in the buffer.

        Args:
            token: Next raw token in source order

        Raises:
            StreamClosedError: If the stream was closed
            BaseException: The abort reason, if the stream was aborted
        """
        self._check_writable()
        async with self._write_lock:
            self._check_writable()
            for out in self._accumulator.push(token):
                await self._put(out)

    async def close(self) -> None:
        """
        Close the write side.

        Flushes the pending literal, then signals end of output.

        Raises:
            StreamClosedError: If the stream was already closed
        """
        self._check_writable()
        async with self._write_lock:
            self._check_writable()
            self._closed = True
            for out in self._accumulator.flush():
                await self._put(out)
            async with self._changed:
                self._done = True
                self._changed.notify_all()
        logger.debug("Token stream closed: %s", self._accumulator.get_metrics())

    async def abort(self, reason: Optional[BaseException] = None) -> None:
        """
        Abort the write side.

        The pending literal and any undelivered output are dropped, blocked
        writers fail, and the reader raises ``reason``. A ``close()`` still
        flushing is interrupted and raises ``reason`` too. Aborting a stream
        whose close has finished, or one already aborted, does nothing.

        Args:
            reason: Exception to surface to the reader. Defaults to
                ``StreamAbortedError``.
        """
        if self._error is not None or self._done:
            return
        if reason is None:
            reason = StreamAbortedError("token stream aborted")

        async with self._changed:
            if self._error is not None or self._done:
                return
            self._error = reason
            self._accumulator.discard()
            self._buffer.clear()
            self._changed.notify_all()
        logger.warning("Token stream aborted: %r", reason)

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------

    def __aiter__(self) -> AsyncIterator[Token]:
        return self

    async def __anext__(self) -> Token:
        async with self._changed:
            await self._changed.wait_for(
                lambda: self._buffer or self._done or self._error is not None
            )
            if self._error is not None:
                raise self._error
            if not self._buffer:
                raise StopAsyncIteration
            token = self._buffer.popleft()
            self._changed.notify_all()
            return token


async def compress_token_stream(source: AsyncIterable[Token]) -> AsyncIterator[Token]:
    """
    Compress tokens from an async source.

    Args:
        source: Async iterable of raw tokens

    Yields:
        Compressed tokens as soon as they are final

    Raises:
        Exception: Whatever the source raises; the pending literal is dropped
    """
    accumulator = LiteralAccumulator()

    try:
        async for token in source:
            for out in accumulator.push(token):
                yield out
    except BaseException:
        accumulator.discard()
        raise

    # Flush remaining
    for out in accumulator.flush():
        yield out
