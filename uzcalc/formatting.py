"""
Display formatting for calculation results.

    format_number(Decimal(1500000))   → "1 500 000"
    format_number(Decimal("2.9999999999"))  → "3"
    format_number(Decimal("12.5"))    → "12.5"
"""

from __future__ import annotations

from decimal import Decimal

from .models import CalculationResult, Outcome

DIVISION_BY_ZERO_TEXT = "Xato (0 ga bo'linmaydi)"
ERROR_TEXT = "Xato"

# Values this close to an integer are shown as that integer
_INTEGER_TOLERANCE = Decimal("1e-9")


def format_number(value: Decimal, separator: str = " ") -> str:
    """Group integer-valued results by thousands; leave fractions ungrouped."""
    rounded = value.to_integral_value()
    if abs(value - rounded) < _INTEGER_TOLERANCE:
        return f"{int(rounded):,}".replace(",", separator)
    return format(value.normalize(), "f")


def display_text(result: CalculationResult, separator: str = " ") -> str:
    """The string a UI shows for a result."""
    if result.outcome == Outcome.NUMBER and result.value is not None:
        return format_number(result.value, separator)
    if result.outcome == Outcome.DIVISION_BY_ZERO:
        return DIVISION_BY_ZERO_TEXT
    return ERROR_TEXT
