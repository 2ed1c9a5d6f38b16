"""
Convert spoken Uzbek number words to their numeric value.

Supported patterns:
    "bir ming besh yuz"      → 1500
    "o'n besh"               → 15    (10 + 5, words are summed)
    "ming"                   → 1000  (a bare magnitude means one of it)
    "12 ta olma"             → 12    (digits are taken as-is, "ta olma" ignored)
    "1e3"                    → 1000  (exponent form is read too)
    ""                       → 0

Unlike a strict converter, this one never raises. Speech recognizers hand us
filler words, and an operand with no number words in it is simply zero.

Known limitation (kept on purpose):
    "uch yuz ming" → 1300, not 300000. Each magnitude flushes the current
    group into the total, so "ming" sees an empty group and counts as 1000.
"""

from __future__ import annotations

import re
from decimal import Decimal

from .lexicon import lookup_cardinal, lookup_magnitude, normalize_word

# Leading numeral of a token: "12" → 12, "5ta" → 5, "-3" → -3, "1e3" → 1000.
# Exponents are capped at three digits to stay inside Decimal's context.
_NUMERAL = re.compile(r"[+-]?\d+(?:e[+-]?\d{1,3}(?!\d))?", re.ASCII)


# ─── Tokenizer ───────────────────────────────────────────────────────


def tokenize(text: str) -> list[str]:
    """Split on whitespace and normalize every token, dropping empty ones."""
    tokens = (normalize_word(part) for part in text.split())
    return [token for token in tokens if token]


# ─── Token Classifier ────────────────────────────────────────────────


def _classify_and_apply(
    token: str, current: Decimal, total: Decimal
) -> tuple[Decimal, Decimal]:
    """Classify a single token and update the running accumulators.

    Returns:
        (new_current, new_total) after processing the token.
        Unrecognized tokens leave both accumulators untouched.
    """
    numeral = _NUMERAL.match(token)
    if numeral:
        return current + Decimal(numeral.group()), total

    cardinal = lookup_cardinal(token)
    if cardinal is not None:
        return current + cardinal, total

    magnitude = lookup_magnitude(token)
    if magnitude is not None:
        effective = current if current else Decimal(1)
        return Decimal(0), total + effective * magnitude

    return current, total


# ─── Main Parser ─────────────────────────────────────────────────────


def parse_number(text: str) -> Decimal:
    """Convert Uzbek number words to a Decimal value.

    Args:
        text: e.g. "bir ming besh yuz"

    Returns:
        Decimal(1500)

    Algorithm:
        Two accumulators:
        - `total`:   completed magnitude groups
        - `current`: the group being built

        For each token:
        - digits / cardinal word → add to `current`
        - magnitude word         → flush `current * magnitude` into `total`
                                   (an empty group counts as 1), reset `current`
        - anything else          → ignored

        The result is `total + current`.
    """
    total = Decimal(0)
    current = Decimal(0)

    for token in tokenize(text or ""):
        current, total = _classify_and_apply(token, current, total)

    return total + current
