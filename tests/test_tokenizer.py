"""Tests for the template tokenizer."""

import pytest

from template_lexer.errors import TemplateSyntaxError
from template_lexer.lexing import iter_tokens, tokenize
from template_lexer.tokens import Token


def test_plain_text_is_one_literal():
    assert tokenize("hello") == [Token.literal("hello", 0, 5)]


def test_empty_source():
    assert tokenize("") == []


def test_interpolation_range_excludes_braces():
    assert tokenize("a{name}b") == [
        Token.literal("a", 0, 1),
        Token.interpolation("name", 2, 6),
        Token.literal("b", 7, 8),
    ]


def test_empty_braces_produce_no_token():
    assert tokenize("a{}b") == [
        Token.literal("a", 0, 1),
        Token.literal("b", 3, 4),
    ]


def test_escape_opening_a_run_starts_at_brace():
    assert tokenize("\\{x") == [
        Token.literal("{", 1, 2),
        Token.literal("x", 2, 3),
    ]


def test_escape_continuing_a_run_owns_backslash():
    assert tokenize("a\\}b") == [
        Token.literal("a", 0, 1),
        Token.literal("}", 1, 3),
        Token.literal("b", 3, 4),
    ]


def test_consecutive_escapes_stay_contiguous():
    assert tokenize("\\{\\{") == [
        Token.literal("{", 1, 2),
        Token.literal("{", 2, 4),
    ]


def test_backslash_before_other_characters_is_text():
    assert tokenize("a\\b\\") == [Token.literal("a\\b\\", 0, 4)]


def test_close_brace_outside_interpolation_is_text():
    assert tokenize("a}b") == [Token.literal("a}b", 0, 3)]


def test_interpolation_value_is_opaque():
    assert tokenize("{ a + {b }") == [Token.interpolation(" a + {b ", 1, 9)]


def test_unterminated_interpolation_raises():
    with pytest.raises(TemplateSyntaxError) as exc_info:
        tokenize("abc{def")
    assert exc_info.value.offset == 3
    assert "offset 3" in str(exc_info.value)


def test_iter_tokens_is_lazy():
    tokens = iter_tokens("ok{x}{broken")
    assert next(tokens) == Token.literal("ok", 0, 2)
    assert next(tokens) == Token.interpolation("x", 3, 4)
    with pytest.raises(TemplateSyntaxError):
        next(tokens)


def test_sample_source_raw_tokens(sample_source):
    assert tokenize(sample_source) == [
        Token.literal("foo\\bar\\baz", 0, 11),
        Token.literal("{", 14, 15),
        Token.literal("monday", 15, 21),
        Token.interpolation("tuesday", 22, 29),
        Token.literal("}", 30, 31),
        Token.interpolation("foo", 32, 35),
        Token.interpolation("bar", 37, 40),
    ]
