"""
Uzbek Voice Calculator — Spoken Uzbek arithmetic phrases to numbers.

Architecture: Operator detection → Operand split → Number-word parsing → Evaluation
Philosophy:  Best-effort on words. Exact on arithmetic.
"""

__version__ = "1.0.0"
