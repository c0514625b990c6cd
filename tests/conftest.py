"""Pytest configuration shared by the template lexer tests."""

import os
import random

import pytest

from template_lexer.config import clear_settings_cache
from template_lexer.tokens import Token


@pytest.fixture(autouse=True)
def _isolate_settings_env():
    """Ensure settings read from the environment do not leak between tests."""
    prev = os.environ.get("TEMPLATE_LEXER_STREAM_HIGH_WATER_MARK")
    clear_settings_cache()
    try:
        yield
    finally:
        clear_settings_cache()
        if prev is None:
            os.environ.pop("TEMPLATE_LEXER_STREAM_HIGH_WATER_MARK", None)
        else:
            os.environ["TEMPLATE_LEXER_STREAM_HIGH_WATER_MARK"] = prev


# Source text used by the end-to-end tests
SAMPLE_SOURCE = "foo\\bar\\baz{}\\{monday{tuesday}}{foo}{bar}"

SAMPLE_COMPRESSED = [
    Token.literal("foo\\bar\\baz", 0, 11),
    Token.literal("{monday", 14, 21),
    Token.interpolation("tuesday", 22, 29),
    Token.literal("}", 30, 31),
    Token.interpolation("foo", 32, 35),
    Token.interpolation("bar", 37, 40),
]


@pytest.fixture
def sample_source():
    return SAMPLE_SOURCE


@pytest.fixture
def sample_compressed():
    return list(SAMPLE_COMPRESSED)


def _random_tokens(seed: int, count: int = 30):
    """Build a well-formed token sequence with random gaps and types."""
    rng = random.Random(seed)
    tokens = []
    offset = 0
    for _ in range(count):
        offset += rng.choice([0, 0, 0, 1, 2])
        length = rng.randint(1, 4)
        value = "".join(rng.choice("abc{}") for _ in range(length))
        if rng.random() < 0.3:
            tokens.append(Token.interpolation(value, offset, offset + length))
        else:
            tokens.append(Token.literal(value, offset, offset + length))
        offset += length
    return tokens


@pytest.fixture
def make_tokens():
    return _random_tokens
