"""Literal run merging for minimal token streams."""

from .token_compressor import LiteralAccumulator, compress_tokens

__all__ = [
    "LiteralAccumulator",
    "compress_tokens",
]
