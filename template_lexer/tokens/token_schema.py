"""
Token Schema: Type-safe token models for template lexing.

This module provides the Pydantic models shared by the tokenizer, the
compressor and the streaming adapter, plus helpers for loading, dumping and
rendering token lists.

Key Features:
- Immutable token value objects (frozen Pydantic models)
- Closed token type enum (literal / interpolation)
- Half-open source ranges validated at construction
- JSON loading/dumping and rendering back to template syntax
"""

import json
from enum import Enum
from typing import List, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


# =============================================================================
# Token Types
# =============================================================================

class TokenType(str, Enum):
    """Kind of a token. The set is closed: every token is one of these."""
    LITERAL = "literal"
    INTERPOLATION = "interpolation"


# =============================================================================
# Token Range
# =============================================================================

class TokenRange(BaseModel):
    """
    Half-open ``[start, end)`` offset interval into the template source.

    Example:
        >>> TokenRange(start=0, end=3).end
        3
    """
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="Offset of the first character")
    end: int = Field(..., description="Offset one past the last character")

    @model_validator(mode='after')
    def check_non_empty(self) -> 'TokenRange':
        """Zero-length and inverted ranges never come out of the tokenizer."""
        if self.end <= self.start:
            raise ValueError(
                f"range end ({self.end}) must be greater than start ({self.start})"
            )
        return self

    def __len__(self) -> int:
        return self.end - self.start


# =============================================================================
# Token
# =============================================================================

class Token(BaseModel):
    """
    A lexed template token.

    For literals ``value`` is the decoded text (escapes already resolved);
    for interpolations it is the raw expression text between the braces.

    Example:
        >>> token = Token.literal("foo", 0, 3)
        >>> token.type
        <TokenType.LITERAL: 'literal'>
        >>> token.range.end
        3
    """
    model_config = ConfigDict(frozen=True)

    type: TokenType = Field(..., description="Token kind")
    value: str = Field(..., description="Decoded literal text or raw expression")
    range: TokenRange = Field(..., description="Source offsets covered by the token")

    @classmethod
    def literal(cls, value: str, start: int, end: int) -> 'Token':
        """Build a literal token."""
        return cls(type=TokenType.LITERAL, value=value, range=TokenRange(start=start, end=end))

    @classmethod
    def interpolation(cls, value: str, start: int, end: int) -> 'Token':
        """Build an interpolation token."""
        return cls(type=TokenType.INTERPOLATION, value=value, range=TokenRange(start=start, end=end))

    @property
    def is_literal(self) -> bool:
        return self.type is TokenType.LITERAL

    def __repr__(self) -> str:
        kind = "Literal" if self.is_literal else "Interpolation"
        return f"{kind}({self.value!r}, {self.range.start}, {self.range.end})"


_TOKEN_LIST = TypeAdapter(List[Token])


# =============================================================================
# Loading / Dumping Utilities
# =============================================================================

def parse_tokens(json_str: str) -> List[Token]:
    """
    Parse a JSON array of tokens.

    Args:
        json_str: JSON text such as
            ``[{"type": "literal", "value": "a", "range": {"start": 0, "end": 1}}]``

    Returns:
        List of validated tokens

    Raises:
        pydantic.ValidationError: If the JSON does not describe valid tokens
    """
    return _TOKEN_LIST.validate_json(json_str)


def tokens_to_json(tokens: Iterable[Token], indent: Optional[int] = None) -> str:
    """Dump tokens as a JSON array (inverse of ``parse_tokens``)."""
    return json.dumps(
        [token.model_dump(mode="json") for token in tokens],
        indent=indent,
    )


def tokens_to_template(tokens: Iterable[Token]) -> str:
    """
    Render tokens back to template syntax.

    Braces inside literals are re-escaped and interpolations are wrapped in
    ``{}``. Offsets are not preserved: empty ``{}`` groups in the original
    source produce no token and so do not reappear. A literal ending in a
    backslash directly before an interpolation cannot be represented.

    Args:
        tokens: Raw or compressed tokens

    Returns:
        Template source that tokenizes back to the same token values

    Example:
        >>> tokens_to_template([Token.literal("{a", 1, 3), Token.interpolation("b", 4, 5)])
        '\\\\{a{b}'
    """
    parts = []
    for token in tokens:
        if token.type is TokenType.LITERAL:
            parts.append(token.value.replace("{", "\\{").replace("}", "\\}"))
        else:
            parts.append("{" + token.value + "}")
    return "".join(parts)
