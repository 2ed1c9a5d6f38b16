"""
Operator detection and operand splitting.

Detection is plain substring search over a fixed, ORDERED vocabulary:

    ADD → SUBTRACT → MULTIPLY → DIVIDE

The first category with any hit wins, no matter where in the phrase the
word sits. "besh ayir ikki qo'sh uch" is therefore an addition.

Detection only lowercases the phrase. Apostrophe variants are NOT folded
here; "qosh" and "qo'sh" are both listed instead.
"""

from __future__ import annotations

import logging

from .exceptions import OperatorNotFound
from .models import Expression, Operator

logger = logging.getLogger(__name__)

# ─── Operator Vocabulary ─────────────────────────────────────────────
# Categories are tried top to bottom; the first with any hit wins.

VOCABULARY: tuple[tuple[Operator, tuple[str, ...]], ...] = (
    (Operator.ADD, ("qo'sh", "qosh", "qo'shish", "qoshish", "plus", "va", "+")),
    (Operator.SUBTRACT, ("ayir", "ayirish", "minus", "-", "aytib ol", "aytib")),
    (Operator.MULTIPLY, ("ko'paytir", "kopaytir", "marta", "barobar", "x", "*")),
    (Operator.DIVIDE, ("bo'lish", "bolish", "bo'lin", "bolin", "/", "taqsim", "bo'linadi")),
)

# Splitting uses its own, narrower lists. Within an operator the first term
# leaving both sides non-empty wins, so "aytib ol" must come before "-"
# ("yigirma-besh aytib ol uch"). Detection-only words such as "bo'linadi"
# fall through to the token-halving fallback.
SPLIT_VOCABULARY: dict[Operator, tuple[str, ...]] = {
    Operator.ADD: ("qo'sh", "qosh", "qo'shish", "qoshish", "plus", "va", "+"),
    Operator.SUBTRACT: ("ayir", "ayirish", "aytib ol", "minus", "-"),
    Operator.MULTIPLY: ("ko'paytir", "kopaytir", "marta", "barobar", "x", "*"),
    Operator.DIVIDE: ("bo'lish", "bolish", "bo'lin", "taqsim", "/"),
}


# ─── Detection ───────────────────────────────────────────────────────


def detect_operator(text: str) -> Operator:
    """Return the highest-priority operator whose vocabulary occurs in `text`.

    Raises:
        OperatorNotFound: If no operator word occurs at all.
    """
    lowered = text.lower()
    for operator, terms in VOCABULARY:
        if any(term in lowered for term in terms):
            return operator
    raise OperatorNotFound(text)


# ─── Splitting ───────────────────────────────────────────────────────


def split_by_operator(text: str, operator: Operator) -> tuple[str, str]:
    """Split `text` into (left, right) around the operator word.

    Each term is located case-insensitively; the first one leaving text on
    both sides wins. If none does (e.g. "plus ikki"), the whitespace tokens
    are cut in half instead. The operator word may then end up inside an
    operand, which is harmless since the number parser skips it.
    """
    lowered = text.lower()
    for term in SPLIT_VOCABULARY[operator]:
        idx = lowered.find(term)
        if idx == -1:
            continue
        left = text[:idx].strip()
        right = text[idx + len(term):].strip()
        if left and right:
            return left, right

    logger.debug("No clean split on %s in %r, halving tokens", operator.value, text)
    tokens = text.split()
    mid = len(tokens) // 2
    return " ".join(tokens[:mid]), " ".join(tokens[mid:])


def resolve_expression(text: str) -> Expression:
    """Detect the operator and split the phrase in one step."""
    operator = detect_operator(text)
    left, right = split_by_operator(text, operator)
    return Expression(left_text=left, right_text=right, operator=operator)
