# Tokenizer.py
"""""
Tokenizer for the arithmetic engine.

Turns the raw input string into a flat list of typed tokens:
numbers, binary operators, unary minus and parentheses.
Whether a '-' is unary or binary is decided by looking back at the
previously emitted token, never at the previous raw character.
"""""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from . import error as E

logger = logging.getLogger(__name__)

# Everything the engine accepts; whitespace separates tokens and is never emitted
ALLOWED_INPUT = re.compile(r"^[0-9+\-*/().\s]*$")

Operations = ["+", "-", "*", "/"]
UNARY_MINUS = "u-"


class TokenType(Enum):
    NUMBER = "number"
    BINARY_OP = "binary_op"
    UNARY_MINUS = "unary_minus"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    @property
    def is_operator(self):
        return self.type in (TokenType.BINARY_OP, TokenType.UNARY_MINUS)

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


# Shared instances for the tokens that carry no payload of their own
LEFT_PAREN = Token(TokenType.LEFT_PAREN, "(")
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ")")
NEGATE = Token(TokenType.UNARY_MINUS, UNARY_MINUS)


def number(text):
    return Token(TokenType.NUMBER, text)


def binary(operator):
    return Token(TokenType.BINARY_OP, operator)


def isNumberChar(char):
    """Return True for characters that can be part of a numeric literal."""
    return char.isdigit() or char == "."


def check_characters(problem):
    """Raise INVALID_CHARACTER for the first character outside the accepted set."""
    if ALLOWED_INPUT.match(problem):
        return
    for position, char in enumerate(problem):
        if not ALLOWED_INPUT.match(char):
            raise E.error_for(
                E.ErrorKind.INVALID_CHARACTER,
                f"Invalid character {char!r} at position {position}.",
                equation=problem,
            )


def is_unary_context(previous):
    """A '-' is unary at the start, after '(' or after another operator."""
    return previous is None or previous.type == TokenType.LEFT_PAREN or previous.is_operator


def read_number(problem, b):
    """Consume the digit/dot run starting at index b.

    Returns:
        (number_token, index_after_run)
    """
    start = b
    hat_schon_komma = False  # Only one dot allowed in a numeric literal

    while b < len(problem) and isNumberChar(problem[b]):
        if problem[b] == ".":
            if hat_schon_komma:
                raise E.error_for(
                    E.ErrorKind.INVALID_NUMBER_FORMAT,
                    f"More than one '.' in number starting at {start}.",
                )
            hat_schon_komma = True
        b += 1

    str_number = problem[start:b]
    if str_number == ".":
        raise E.error_for(E.ErrorKind.INVALID_NUMBER_FORMAT, "A lone '.' is not a number.")
    return number(str_number), b


def tokenize(problem):
    """Convert the input string into a list of Tokens.

    Raises:
        ParseError: INVALID_CHARACTER or INVALID_NUMBER_FORMAT.
    """
    check_characters(problem)

    tokens = []
    b = 0
    while b < len(problem):
        current_char = problem[b]
        previous = tokens[-1] if tokens else None

        # --- Whitespace: ends a number, emits nothing ---
        if current_char.isspace():
            b += 1
            continue

        # --- Parentheses ---
        if current_char == "(":
            tokens.append(LEFT_PAREN)
        elif current_char == ")":
            tokens.append(RIGHT_PAREN)

        # --- Operators, with unary minus detection ---
        elif current_char in Operations:
            if current_char == "-" and is_unary_context(previous):
                tokens.append(NEGATE)
            else:
                tokens.append(binary(current_char))

        # --- Numbers: digits and decimal separator ---
        else:
            try:
                token, b = read_number(problem, b)
            except E.ParseError as e:
                e.equation = problem
                raise
            tokens.append(token)
            continue

        b += 1

    logger.debug("Tokens for %r: %s", problem, tokens)
    return tokens
