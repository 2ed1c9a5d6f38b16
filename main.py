#!/usr/bin/env python3
"""
Uzbek Voice Calculator — Entry Point
=====================================

Evaluates typed Uzbek arithmetic phrases and prints the results.

Usage:
    python main.py                          # Run the built-in sample phrases
    python main.py "ikki qo'sh uch"         # Evaluate one phrase
    UZCALC_LOG_LEVEL=DEBUG python main.py   # Show how each phrase was resolved
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from uzcalc.config import load_settings
from uzcalc.models import CalculationResult, Outcome
from uzcalc.pipeline import Calculator

load_dotenv()


# ─── Sample Phrases — As a Recognizer Would Hand Them Over ──────────

SAMPLE_PHRASES = [
    "ikki qo'sh uch",
    "besh ayir ikki",
    "uch ko'paytir to'rt",
    "olti bo'lish ikki",
    "bir ming besh yuz qo'sh yigirma besh",
    "O'n besh bo'lish nol.",
    "mavjud bo'lmagan so'zlar",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72

_OUTCOME_COLORS = {
    Outcome.NUMBER: _GREEN,
    Outcome.DIVISION_BY_ZERO: _YELLOW,
    Outcome.OPERATOR_NOT_FOUND: _RED,
}


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_result(result: CalculationResult) -> None:
    """Print one phrase and what it evaluated to."""
    color = _OUTCOME_COLORS[result.outcome]
    print(f"  Phrase:    {result.transcript}")
    if result.equation:
        print(f"  Equation:  {_DIM}{result.equation}{_RESET}")
    print(f"  Result:    {color}{_BOLD}{result.display}{_RESET}")
    if result.message:
        print(f"  {_DIM}{result.message}{_RESET}")
    print(f"{'─' * _WIDTH}")


def print_report(results: list[CalculationResult]) -> int:
    """Pretty-print all results with ANSI color codes.

    Returns:
        0 if every phrase produced a number, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  UZBEK VOICE CALCULATOR{_RESET}")
    print(f"{'=' * _WIDTH}")

    for result in results:
        _print_result(result)

    failed = [r for r in results if not r.ok]
    if failed:
        print(f"  {_RED}{_BOLD}{len(failed)} of {len(results)} phrase(s) did not evaluate{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL PHRASES EVALUATED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if failed else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Evaluate the phrase given on the command line, or the samples."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    args = sys.argv[1:] if argv is None else argv
    phrases = [" ".join(args)] if args else SAMPLE_PHRASES

    calculator = Calculator(thousands_separator=settings.thousands_separator)
    results = [calculator.run(phrase) for phrase in phrases]
    return print_report(results)


if __name__ == "__main__":
    sys.exit(main())
