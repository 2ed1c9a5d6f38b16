"""
Evaluate a single-operator Uzbek arithmetic phrase.

    evaluate("ikki qo'sh uch")        → Decimal(5)
    evaluate("o'n besh bo'lish nol")  → DIVISION_BY_ZERO
    evaluate("salom dunyo")           → raises OperatorNotFound

Pure: no I/O, no state, safe to call from any number of threads.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Union

from .models import Expression, Operator, Outcome
from .number_parser import parse_number
from .operators import resolve_expression

DIVISION_BY_ZERO = Outcome.DIVISION_BY_ZERO

EvaluationValue = Union[Decimal, Literal[Outcome.DIVISION_BY_ZERO]]


def apply_operator(operator: Operator, a: Decimal, b: Decimal) -> EvaluationValue:
    """Apply `operator` to two operands. Dividing by zero yields the marker."""
    if operator is Operator.ADD:
        return a + b
    if operator is Operator.SUBTRACT:
        return a - b
    if operator is Operator.MULTIPLY:
        return a * b
    if b == 0:
        return DIVISION_BY_ZERO
    return a / b


def parse_operands(expression: Expression) -> tuple[Decimal, Decimal]:
    """Parse both sides of an expression; a missing side counts as zero."""
    return (
        parse_number(expression.left_text or "0"),
        parse_number(expression.right_text or "0"),
    )


def evaluate(text: str) -> EvaluationValue:
    """Evaluate a phrase to a number or the division-by-zero marker.

    Raises:
        OperatorNotFound: If the phrase names no operator.
    """
    _, _, value = evaluate_expression(resolve_expression(text))
    return value


def evaluate_expression(
    expression: Expression,
) -> tuple[Decimal, Decimal, EvaluationValue]:
    """Parse both operands and apply the operator.

    Returns:
        (left_value, right_value, value). Shared by evaluate() and the
        pipeline, which also reports the operands.
    """
    a, b = parse_operands(expression)
    return a, b, apply_operator(expression.operator, a, b)
