# PostfixEvaluator.py
"""Stack evaluation of a postfix token list."""

import logging
import math

from . import error as E
from .Tokenizer import TokenType

logger = logging.getLogger(__name__)


def malformed(message):
    return E.error_for(E.ErrorKind.MALFORMED_EXPRESSION, message)


def apply_operator(operator, left_value, right_value):
    """Apply a binary operator. Division by an exact zero is rejected before dividing."""
    if operator == "+":
        return left_value + right_value
    elif operator == "-":
        return left_value - right_value
    elif operator == "*":
        return left_value * right_value
    elif operator == "/":
        if right_value == 0:
            raise E.error_for(E.ErrorKind.DIVISION_BY_ZERO)
        return left_value / right_value
    else:
        raise malformed(f"Unknown operator: {operator}")


def eval_postfix(tokens):
    """Evaluate postfix tokens and return a finite float.

    Raises:
        CalculationError: MALFORMED_EXPRESSION, DIVISION_BY_ZERO or MATH_ERROR.
    """
    stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            stack.append(float(token.value))

        elif token.type == TokenType.UNARY_MINUS:
            if len(stack) < 1:
                raise malformed("Missing operand for unary '-'.")
            stack.append(-stack.pop())

        elif token.type == TokenType.BINARY_OP:
            if len(stack) < 2:
                raise malformed(f"Missing operand for '{token.value}'.")
            right_value = stack.pop()
            left_value = stack.pop()
            stack.append(apply_operator(token.value, left_value, right_value))

        else:
            raise malformed(f"Unexpected token in postfix sequence: {token.value}")

    if len(stack) != 1:
        logger.debug("Stack has %d values after evaluation, expected 1", len(stack))
        raise malformed("Malformed expression.")

    result = stack[0]
    if not math.isfinite(result):
        raise E.error_for(E.ErrorKind.MATH_ERROR, f"Result is not finite: {result}")
    return result
