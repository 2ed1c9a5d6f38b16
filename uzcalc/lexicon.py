"""
Uzbek number-word lookup tables.

Two disjoint, read-only tables:
  - CARDINALS:  words that ADD to the running group ("besh" → 5, "qirq" → 40)
  - MAGNITUDES: words that MULTIPLY and flush the group ("ming" → 1000)

Speech recognizers spell the same word several ways ("to'rt", "tort").
Every known variant is its own key with the same value. Keys are stored
already normalized (see normalize_word), so lookups are plain dict hits.

Teen numbers are compositional in Uzbek ("o'n bir" = 10 + 1), so no
multi-word keys are stored: the parser only ever looks up single tokens.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# ─── Word Lookup Tables ──────────────────────────────────────────────

CARDINALS: Mapping[str, int] = MappingProxyType({
    "nol": 0,
    "bir": 1,
    "ikki": 2,
    "uch": 3,
    "to'rt": 4,
    "tort": 4,
    "besh": 5,
    "olti": 6,
    "yetti": 7,
    "sakkiz": 8,
    "to'qqiz": 9,
    "toqqiz": 9,
    "o'n": 10,
    "on": 10,
    "yigirma": 20,
    "o'ttiz": 30,
    "ottiz": 30,
    "qirq": 40,
    "ellik": 50,
    "oltmish": 60,
    "yetmish": 70,
    "sakson": 80,
    "to'qson": 90,
    "toqson": 90,
})

MAGNITUDES: Mapping[str, int] = MappingProxyType({
    "yuz": 100,
    "ming": 1_000,
    "million": 1_000_000,
    "milliard": 1_000_000_000,
})

APOSTROPHE = "'"

_PUNCTUATION = re.compile(r"[.,?!]")
_APOSTROPHE_VARIANTS = re.compile(r"[’`]")


# ─── Normalization ───────────────────────────────────────────────────


def normalize_word(word: str) -> str:
    """Strip `. , ? !`, lowercase, collapse ’ and ` to ', trim."""
    word = _PUNCTUATION.sub("", word).lower()
    return _APOSTROPHE_VARIANTS.sub(APOSTROPHE, word).strip()


# ─── Lookups ─────────────────────────────────────────────────────────


def lookup_cardinal(word: str) -> int | None:
    """Value of a normalized cardinal word, or None if it is not one."""
    return CARDINALS.get(word)


def lookup_magnitude(word: str) -> int | None:
    """Value of a normalized magnitude word, or None if it is not one."""
    return MAGNITUDES.get(word)
