"""
Template Lexer: Lexes ``{...}`` templates into minimal token streams.

Example:
    >>> from template_lexer import compress_tokens, tokenize
    >>> compress_tokens(tokenize("Hello \\{world\\}, {name}!"))
    [Literal('Hello {world}, ', 0, 17), Interpolation('name', 18, 22), Literal('!', 23, 24)]
"""

import logging

from .errors import (
    TemplateLexerError,
    TemplateSyntaxError,
    StreamClosedError,
    StreamAbortedError,
)
from .tokens import (
    Token,
    TokenType,
    TokenRange,
    parse_tokens,
    tokens_to_json,
    tokens_to_template,
)
from .lexing import iter_tokens, tokenize
from .coalescing import LiteralAccumulator, compress_tokens
from .streaming import TokenCompressorStream, compress_token_stream

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "TemplateLexerError",
    "TemplateSyntaxError",
    "StreamClosedError",
    "StreamAbortedError",
    "Token",
    "TokenType",
    "TokenRange",
    "parse_tokens",
    "tokens_to_json",
    "tokens_to_template",
    "iter_tokens",
    "tokenize",
    "LiteralAccumulator",
    "compress_tokens",
    "TokenCompressorStream",
    "compress_token_stream",
]
