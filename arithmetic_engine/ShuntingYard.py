# ShuntingYard.py
"""""
Infix to postfix conversion (shunting-yard).

Reorders the token list so that a left-to-right stack walk applies
operators with the usual precedence. Parentheses never reach the output.
"""""

import logging

from . import error as E
from .Tokenizer import TokenType, UNARY_MINUS

logger = logging.getLogger(__name__)

# operator -> (precedence, right associative)
PRECEDENCE = {
    UNARY_MINUS: (4, True),
    "*": (3, False),
    "/": (3, False),
    "+": (2, False),
    "-": (2, False),
}


def precedence(token):
    return PRECEDENCE[token.value][0]


def is_right_associative(token):
    return PRECEDENCE[token.value][1]


def should_pop(token, top):
    """True when `top` on the operator stack must be emitted before pushing `token`."""
    if not top.is_operator:
        # '(' acts as a barrier
        return False
    if is_right_associative(token):
        return precedence(token) < precedence(top)
    return precedence(token) <= precedence(top)


def mismatched(message):
    return E.error_for(E.ErrorKind.MISMATCHED_PARENTHESES, message)


def to_postfix(tokens):
    """Convert an infix token list to postfix order.

    Raises:
        ParseError: MISMATCHED_PARENTHESES.
    """
    output = []
    operators = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.is_operator:
            while operators and should_pop(token, operators[-1]):
                output.append(operators.pop())
            operators.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            operators.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            found = False
            while operators:
                top = operators.pop()
                if top.type == TokenType.LEFT_PAREN:
                    found = True
                    break
                output.append(top)
            if not found:
                raise mismatched("Missing '('.")

    while operators:
        top = operators.pop()
        if top.type in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN):
            raise mismatched("Missing ')'.")
        output.append(top)

    logger.debug("Postfix: %s", " ".join(t.value for t in output))
    return output
