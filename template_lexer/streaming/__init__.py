"""Incremental token compression over asyncio."""

from .compressor_stream import TokenCompressorStream, compress_token_stream

__all__ = [
    "TokenCompressorStream",
    "compress_token_stream",
]
