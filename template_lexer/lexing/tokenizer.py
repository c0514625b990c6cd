"""
Tokenizer: Splits template source into literal and interpolation tokens.

Template syntax:
- Plain text is literal
- ``{expr}`` is an interpolation; ``expr`` runs up to the first ``}``
- ``\\{`` and ``\\}`` escape a brace; any other backslash is plain text
- A ``}`` outside an interpolation is plain text
- An empty ``{}`` produces no token

Escaped braces are emitted as one-character literal tokens so the compressor
can merge them with surrounding text. An escape that continues a literal
run owns its backslash (range starts at the backslash); an escape that opens
a run starts at the brace itself.
"""

import logging
from typing import Iterator, List

from ..errors import TemplateSyntaxError
from ..tokens import Token


logger = logging.getLogger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
ESCAPE = "\\"
ESCAPABLE = frozenset((OPEN_BRACE, CLOSE_BRACE))


def iter_tokens(source: str) -> Iterator[Token]:
    """
    Lazily tokenize template source.

    Args:
        source: Template text

    Yields:
        Raw tokens in source order (not compressed)

    Raises:
        TemplateSyntaxError: If an interpolation is never closed

    Example:
        >>> list(iter_tokens("a\\\\{{b}"))
        [Literal('a', 0, 1), Literal('{', 1, 3), Interpolation('b', 4, 5)]
    """
    text_start = 0
    literal_end = -1  # end of the last literal yielded
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]

        if ch == ESCAPE and i + 1 < n and source[i + 1] in ESCAPABLE:
            if text_start < i:
                yield Token.literal(source[text_start:i], text_start, i)
                literal_end = i
            start = i if literal_end == i else i + 1
            yield Token.literal(source[i + 1], start, i + 2)
            i += 2
            text_start = literal_end = i

        elif ch == OPEN_BRACE:
            if text_start < i:
                yield Token.literal(source[text_start:i], text_start, i)
            close = source.find(CLOSE_BRACE, i + 1)
            if close == -1:
                raise TemplateSyntaxError("unterminated interpolation", offset=i)
            if close > i + 1:
                yield Token.interpolation(source[i + 1:close], i + 1, close)
            i = close + 1
            text_start = i

        else:
            i += 1

    if text_start < n:
        yield Token.literal(source[text_start:n], text_start, n)


def tokenize(source: str) -> List[Token]:
    """Tokenize template source into a list of raw tokens."""
    tokens = list(iter_tokens(source))
    logger.debug("Tokenized %d chars into %d tokens", len(source), len(tokens))
    return tokens
