"""Tests for arithmetic_engine.Tokenizer."""

import pytest

from arithmetic_engine import error as E
from arithmetic_engine.Tokenizer import (
    LEFT_PAREN, NEGATE, RIGHT_PAREN, TokenType, binary, number, tokenize,
)


def test_simple_expression():
    assert tokenize("2+3*4") == [number("2"), binary("+"), number("3"), binary("*"), number("4")]


def test_whitespace_is_ignored():
    assert tokenize(" 12 \t+\n 3 ") == tokenize("12+3")


def test_decimal_numbers_are_single_tokens():
    assert tokenize("3.25/0.5") == [number("3.25"), binary("/"), number("0.5")]


@pytest.mark.parametrize("text", ["3.", ".5"])
def test_dot_at_either_end_of_number_is_accepted(text):
    assert tokenize(text) == [number(text)]


def test_leading_minus_is_unary():
    assert tokenize("-5+3")[0] == NEGATE


def test_minus_after_left_paren_is_unary():
    assert tokenize("(-3") == [LEFT_PAREN, NEGATE, number("3")]


def test_binary_minus_followed_by_unary_minus():
    assert tokenize("2--3") == [number("2"), binary("-"), NEGATE, number("3")]


def test_minus_after_unary_minus_is_unary():
    assert tokenize("--4") == [NEGATE, NEGATE, number("4")]


def test_minus_after_right_paren_is_binary():
    assert tokenize("(1)-2")[3] == binary("-")


def test_minus_after_other_operators_is_unary():
    for op in "+*/":
        assert tokenize(f"1{op}-2")[2] == NEGATE


def test_disambiguation_uses_emitted_token_not_raw_character():
    # the space sits between ')' and '-' in the raw text
    assert tokenize("(1) - 2")[3].type == TokenType.BINARY_OP


def test_empty_input_gives_no_tokens():
    assert tokenize("") == []
    assert tokenize("   ") == []


@pytest.mark.parametrize("text", ["2+a", "1,5", "2^3", "x", "3%2", "１+1"])
def test_invalid_character(text):
    with pytest.raises(E.ParseError) as excinfo:
        tokenize(text)
    assert excinfo.value.kind is E.ErrorKind.INVALID_CHARACTER
    assert excinfo.value.code == "3011"


def test_invalid_character_message_names_position():
    with pytest.raises(E.ParseError, match="position 2"):
        tokenize("2+a")


@pytest.mark.parametrize("text", ["1..2", "1.2.3", ".", "2+.", "(.)"])
def test_invalid_number_format(text):
    with pytest.raises(E.ParseError) as excinfo:
        tokenize(text)
    assert excinfo.value.kind is E.ErrorKind.INVALID_NUMBER_FORMAT
    assert excinfo.value.equation == text


def test_tokens_are_immutable():
    token = tokenize("7")[0]
    with pytest.raises(AttributeError):
        token.value = "8"


def test_whitespace_separates_numbers():
    assert tokenize("1 2") == [number("1"), number("2")]
    assert tokenize("1.5\t3") == [number("1.5"), number("3")]


def test_whitespace_between_dot_and_digits_splits_the_number():
    with pytest.raises(E.ParseError) as excinfo:
        tokenize(". 5")
    assert excinfo.value.kind is E.ErrorKind.INVALID_NUMBER_FORMAT
