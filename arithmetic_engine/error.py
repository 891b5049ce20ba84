# error.py
"""Coded error types shared by every stage of the engine."""

from enum import Enum


class ErrorKind(Enum):
    """Discriminated failure reasons. The value is the four-digit error code."""
    INVALID_CHARACTER = "3011"
    INVALID_NUMBER_FORMAT = "3008"
    MISMATCHED_PARENTHESES = "3009"
    MALFORMED_EXPRESSION = "3012"
    DIVISION_BY_ZERO = "3003"
    MATH_ERROR = "3026"

    @property
    def code(self):
        return self.value

    @property
    def description(self):
        return ERROR_MESSAGES[self.value]

    @property
    def category(self):
        return category_for(self.value)


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None, kind=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation
        self.kind = kind

    @classmethod
    def from_kind(cls, kind, message=None, equation=None):
        """Build the error for `kind`, defaulting the message to the table entry."""
        if message is None:
            message = kind.description
        return cls(message, code=kind.code, equation=equation, kind=kind)

    @property
    def category(self):
        return category_for(self.code)

    def __str__(self):
        return f"[{self.code}] {self.message}"


class ParseError(MathError):
    pass


class CalculationError(MathError):
    pass


# Kinds raised by the tokenizer and the converter; the rest come from evaluation.
PARSE_KINDS = (
    ErrorKind.INVALID_CHARACTER,
    ErrorKind.INVALID_NUMBER_FORMAT,
    ErrorKind.MISMATCHED_PARENTHESES,
)


def error_for(kind, message=None, equation=None):
    """Return a ParseError or CalculationError matching the stage that owns `kind`."""
    cls = ParseError if kind in PARSE_KINDS else CalculationError
    return cls.from_kind(kind, message=message, equation=equation)


Error_Dictionary = {

    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error",

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Sub-category
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3008" : "Invalid number format.",
    "3009" : "Mismatched parentheses.",
    "3011" : "Invalid character.",
    "3012" : "Malformed expression.",
    "3026" : "Number too big.",

    "5001" : "Settings file could not be read.",
    "5002" : "Invalid setting value, using the default:",

    "9999" : "Unexpected Error: " #+error
}


def category_for(code):
    """Main error category for a four-digit code (first digit)."""
    return Error_Dictionary.get(str(code)[:1], Error_Dictionary["9"])
