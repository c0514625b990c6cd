"""Exceptions raised by the template lexer."""

from typing import Optional


class TemplateLexerError(Exception):
    """Base class for all template lexer errors."""


class TemplateSyntaxError(TemplateLexerError):
    """
    Raised by the tokenizer for source it cannot lex.

    Attributes:
        offset: Source offset where the problem starts
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


class StreamClosedError(TemplateLexerError):
    """Raised when writing to or closing a stream that was already closed."""


class StreamAbortedError(TemplateLexerError):
    """Surfaced to the reader when the writer aborts without giving a reason."""
