# MathEngine.py
"""""
Core calculation engine.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tokens.
2) ShuntingYard: reorders the tokens into postfix (Reverse Polish) order.
3) PostfixEvaluator: walks the postfix list with an operand stack.
4) Formatter: renders results for the collaborator (console).

Every call is independent: no module-level state is read or written,
so evaluate() can be used from several threads at once.
"""""

import logging
from dataclasses import dataclass
from typing import Optional

from . import error as E
from .PostfixEvaluator import eval_postfix
from .ShuntingYard import to_postfix
from .Tokenizer import tokenize

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PLACES = 10
ungefaehr_zeichen = "\u2248"  # "≈"


@dataclass(frozen=True)
class EvalResult:
    """Either a finite value or a classified error, never both."""
    value: Optional[float] = None
    error: Optional[E.ErrorKind] = None
    message: str = ""

    @classmethod
    def Ok(cls, value):
        return cls(value=value)

    @classmethod
    def Err(cls, error, message=""):
        return cls(error=error, message=message or error.description)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Return the value, or raise the coded exception for the error."""
        if self.ok:
            return self.value
        raise E.error_for(self.error, self.message)


# -----------------------------
# Public entry points
# -----------------------------

def calculate(problem):
    """Main raising API: tokenize → postfix → evaluate.

    Raises:
        MathError subclass with `kind` set and the source equation attached.
    """
    try:
        tokens = tokenize(problem)
        postfix = to_postfix(tokens)
        return eval_postfix(postfix)
    except E.MathError as e:
        e.equation = problem
        raise


def evaluate(problem):
    """Evaluate `problem` and return an EvalResult; never raises for bad input."""
    try:
        return EvalResult.Ok(calculate(problem))
    except E.MathError as e:
        logger.debug("Evaluation of %r failed: %s", problem, e)
        return EvalResult.Err(e.kind, e.message)


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, target_decimals=DEFAULT_DECIMAL_PLACES):
    """Format a numeric result for display.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag indicates whether rounding occurred.
    """
    rounding = False

    if ergebnis == int(ergebnis):
        # Integer result – drop the fractional part
        return str(int(ergebnis)), rounding

    gerundetes_ergebnis = round(ergebnis, max(target_decimals, 0))
    if gerundetes_ergebnis != ergebnis:
        rounding = True
    if gerundetes_ergebnis == int(gerundetes_ergebnis):
        return str(int(gerundetes_ergebnis)), rounding

    # Fixed-point, never exponent notation
    ausgabe_string = f"{gerundetes_ergebnis:.{max(target_decimals, 0)}f}".rstrip("0").rstrip(".")
    return ausgabe_string, rounding


def render(result, target_decimals=DEFAULT_DECIMAL_PLACES):
    """Render an EvalResult as the display string: '= 14', '≈ 0.3333333333' or 'Error'."""
    if not result.ok:
        return "Error"
    ausgabe_string, rounding = cleanup(result.value, target_decimals)
    if rounding:
        return f"{ungefaehr_zeichen} " + ausgabe_string
    return "= " + ausgabe_string
