"""
Custom exception hierarchy for the calculator.

Only failures that stop an evaluation live here. Division by zero is a
result, not an error, and unknown words are skipped by the parser.
"""

from __future__ import annotations

OPERATOR_HINT = "Operator topilmadi. Masalan: \"ikki qo'sh uch\""


class CalculatorError(Exception):
    """Base exception for all calculation failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class OperatorNotFound(CalculatorError):
    """The phrase contains no addition, subtraction, multiplication or division word."""

    def __init__(self, text: str, message: str = OPERATOR_HINT):
        super().__init__("OPERATOR_NOT_FOUND", message, {"text": text})
