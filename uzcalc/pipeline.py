"""
Calculation pipeline — turns one transcript into a tagged result.

Flow:
  ┌────────────┐
  │ Transcript │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Operator  │   ← Fixed-priority substring search
  │  Resolver  │     (no operator → OPERATOR_NOT_FOUND result)
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Number   │   ← Left and right operands, words → Decimal
  │   Parser   │
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Evaluator  │   ← a op b, or DIVISION_BY_ZERO
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Result   │   ← Outcome tag + value + display string
  └────────────┘

Where `evaluate()` raises OperatorNotFound, the pipeline reports it as a
result so UI code never has to catch anything.
"""

from __future__ import annotations

import logging

from .evaluator import DIVISION_BY_ZERO, evaluate_expression
from .exceptions import CalculatorError
from .formatting import display_text, format_number
from .models import CalculationResult, Outcome
from .operators import resolve_expression

logger = logging.getLogger(__name__)


class Calculator:
    """Orchestrates the full phrase → result workflow.

    Usage:
        calculator = Calculator()
        result = calculator.run("ikki qo'sh uch")
        if result.ok:
            print(result.display)    # "5"
    """

    def __init__(self, thousands_separator: str = " "):
        self.thousands_separator = thousands_separator

    def run(self, text: str) -> CalculationResult:
        """Evaluate one transcript.

        Args:
            text: The recognized or typed phrase.

        Returns:
            CalculationResult tagged NUMBER, DIVISION_BY_ZERO or OPERATOR_NOT_FOUND.
        """
        transcript = text.strip()

        # ── Step 1: Operator + split ───────────────────────────────
        try:
            expression = resolve_expression(transcript)
        except CalculatorError as e:
            logger.info("Could not evaluate %r: %s", transcript, e)
            return self._finish(
                CalculationResult(
                    transcript=transcript,
                    outcome=Outcome.OPERATOR_NOT_FOUND,
                    message=str(e),
                )
            )

        # ── Step 2: Operands + apply (same path as evaluate()) ─────
        a, b, value = evaluate_expression(expression)
        logger.debug(
            "Resolved %r as %s %s %s", transcript, a, expression.operator.value, b
        )

        # ── Step 3: Tag the result ─────────────────────────────────
        result = CalculationResult(
            transcript=transcript,
            outcome=Outcome.NUMBER,
            operator=expression.operator,
            left_value=a,
            right_value=b,
        )
        if value is DIVISION_BY_ZERO:
            result.outcome = Outcome.DIVISION_BY_ZERO
        else:
            result.value = value
        return self._finish(result)

    # ─── Presentation ───────────────────────────────────────────────

    def _finish(self, result: CalculationResult) -> CalculationResult:
        """Attach the display string and, when operands exist, the equation."""
        result.display = display_text(result, self.thousands_separator)
        if result.operator is not None:
            assert result.left_value is not None
            assert result.right_value is not None
            result.equation = (
                f"{format_number(result.left_value, self.thousands_separator)} "
                f"{result.operator.value} "
                f"{format_number(result.right_value, self.thousands_separator)} "
                f"= {result.display}"
            )
        return result
