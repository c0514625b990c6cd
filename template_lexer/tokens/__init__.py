"""Pydantic token models shared by the tokenizer and the compressor."""

from .token_schema import (
    Token,
    TokenType,
    TokenRange,
    parse_tokens,
    tokens_to_json,
    tokens_to_template,
)

__all__ = [
    "Token",
    "TokenType",
    "TokenRange",
    "parse_tokens",
    "tokens_to_json",
    "tokens_to_template",
]
