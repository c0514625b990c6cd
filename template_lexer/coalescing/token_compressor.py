"""
Token Compressor: Merges runs of literal tokens into single tokens.

This module implements the merge state shared by the pull-style compressor
and the streaming adapter, and the pull-style ``compress_tokens`` function.

Key Features:
- Single forward pass, linear in token count
- Literal values joined once per run
- Interpolation tokens pass through untouched
- Metrics tracking for debug logging
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..tokens import Token, TokenType


logger = logging.getLogger(__name__)


# =============================================================================
# Pending Literal Run
# =============================================================================

class _PendingLiteral:
    """An open run of source-contiguous literal tokens."""

    __slots__ = ("parts", "start", "end", "count")

    def __init__(self, token: Token):
        self.parts = [token.value]
        self.start = token.range.start
        self.end = token.range.end
        self.count = 1

    def continues_with(self, token: Token) -> bool:
        return token.range.start == self.end

    def append(self, token: Token) -> None:
        self.parts.append(token.value)
        self.end = token.range.end
        self.count += 1

    def to_token(self) -> Token:
        return Token.literal("".join(self.parts), self.start, self.end)


# =============================================================================
# Literal Accumulator
# =============================================================================

class LiteralAccumulator:
    """
    Folds tokens one at a time, holding back the current literal run.

    A run ends when an interpolation arrives, when a literal arrives that does
    not start where the run ends, or when the caller flushes.

    Example:
        >>> acc = LiteralAccumulator()
        >>> acc.push(Token.literal("a", 0, 1))
        []
        >>> acc.push(Token.literal("b", 1, 2))
        []
        >>> acc.push(Token.interpolation("x", 3, 4))
        [Literal('ab', 0, 2), Interpolation('x', 3, 4)]
    """

    def __init__(self):
        self._pending: Optional[_PendingLiteral] = None

        # Metrics
        self.tokens_received = 0
        self.tokens_emitted = 0
        self.literals_merged = 0

    @property
    def has_pending(self) -> bool:
        """True while a literal run is held back."""
        return self._pending is not None

    def push(self, token: Token) -> List[Token]:
        """
        Push a token and return any tokens that became final.

        Args:
            token: Next raw token in source order

        Returns:
            List of final tokens (0, 1 or 2)
        """
        self.tokens_received += 1
        out = []

        if token.type is TokenType.LITERAL:
            if self._pending is not None and self._pending.continues_with(token):
                self._pending.append(token)
            else:
                out.extend(self.flush())
                self._pending = _PendingLiteral(token)
        else:
            out.extend(self.flush())
            out.append(token)
            self.tokens_emitted += 1

        return out

    def flush(self) -> List[Token]:
        """
        Close the current literal run.

        Call when the input is exhausted.

        Returns:
            List containing the merged literal if a run was open
        """
        if self._pending is None:
            return []
        pending = self._pending
        self._pending = None
        self.tokens_emitted += 1
        self.literals_merged += pending.count - 1
        return [pending.to_token()]

    def discard(self) -> None:
        """Drop the current literal run without emitting it."""
        if self._pending is not None:
            logger.debug(
                "Discarding pending literal at %d-%d (%d tokens)",
                self._pending.start, self._pending.end, self._pending.count,
            )
        self._pending = None

    def get_metrics(self) -> Dict[str, Any]:
        """Get compression metrics for logging."""
        ratio = self.tokens_emitted / self.tokens_received if self.tokens_received > 0 else 0
        return {
            "tokens_received": self.tokens_received,
            "tokens_emitted": self.tokens_emitted,
            "literals_merged": self.literals_merged,
            "compression_ratio": round(ratio, 3),
        }


# =============================================================================
# Pull-style Compressor
# =============================================================================

def compress_tokens(tokens: Iterable[Token]) -> List[Token]:
    """
    Merge every run of source-contiguous literal tokens into one token.

    A literal that does not start where the previous literal ended (a gap in
    the source, such as an empty ``{}``) starts a new run.

    Args:
        tokens: Raw tokens in source order

    Returns:
        Compressed tokens in the same order

    Example:
        >>> compress_tokens([
        ...     Token.literal("foo", 0, 3),
        ...     Token.literal("bar", 3, 6),
        ... ])
        [Literal('foobar', 0, 6)]
    """
    accumulator = LiteralAccumulator()
    compressed = []

    for token in tokens:
        compressed.extend(accumulator.push(token))

    # Flush remaining
    compressed.extend(accumulator.flush())

    logger.debug("Compressed tokens: %s", accumulator.get_metrics())
    return compressed
