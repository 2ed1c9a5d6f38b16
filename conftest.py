"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from uzcalc.pipeline import Calculator  # noqa: E402


@pytest.fixture
def calculator() -> Calculator:
    """A calculator with the default space separator."""
    return Calculator()
