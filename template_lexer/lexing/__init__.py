"""Template source tokenizer."""

from .tokenizer import iter_tokens, tokenize

__all__ = [
    "iter_tokens",
    "tokenize",
]
