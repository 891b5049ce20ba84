"""Arithmetic expression engine: tokenizer, shunting-yard converter and postfix evaluator."""
from .error import ErrorKind, MathError, ParseError, CalculationError
from .MathEngine import EvalResult, evaluate, calculate

__all__ = [
    'ErrorKind', 'MathError', 'ParseError', 'CalculationError',
    'EvalResult', 'evaluate', 'calculate',
]
