"""
Pydantic models for calculation data.

The evaluator's answer is a tagged result: callers branch on `outcome`
instead of inspecting the type of `value`.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


# ─── Operators ──────────────────────────────────────────────────────


class Operator(str, Enum):
    """The four supported arithmetic operators, valued by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# ─── Outcome Tags ───────────────────────────────────────────────────


class Outcome(str, Enum):
    """Which variant of the result a calculation produced."""

    NUMBER = "NUMBER"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"  # Displayable, not a fault
    OPERATOR_NOT_FOUND = "OPERATOR_NOT_FOUND"


# ─── Expression ─────────────────────────────────────────────────────


class Expression(BaseModel):
    """A phrase split into its two operand texts around one operator."""

    model_config = ConfigDict(frozen=True)

    left_text: str
    right_text: str
    operator: Operator


# ─── Calculation Result ─────────────────────────────────────────────


class CalculationResult(BaseModel):
    """The final output of the calculator for one phrase."""

    transcript: str
    outcome: Outcome
    value: Optional[Decimal] = None  # Only set when outcome is NUMBER
    operator: Optional[Operator] = None
    left_value: Optional[Decimal] = None
    right_value: Optional[Decimal] = None
    display: str = ""  # What the UI shows, e.g. "1 500" or "Xato"
    equation: Optional[str] = None  # e.g. "2 + 3 = 5"
    message: Optional[str] = None  # Human-readable hint on failure

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.NUMBER
