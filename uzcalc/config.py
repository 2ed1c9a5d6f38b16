"""
Runtime configuration read from environment variables.

Entry points load a `.env` file first (python-dotenv), so the same
variables can live there during development.

    UZCALC_LOG_LEVEL            DEBUG | INFO | WARNING ...   (default INFO)
    UZCALC_THOUSANDS_SEPARATOR  separator for display       (default " ")
    UZCALC_MAX_TEXT_LENGTH      max phrase length over HTTP (default 500)
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Validated runtime settings."""

    log_level: str = "INFO"
    thousands_separator: str = " "
    max_text_length: int = Field(default=500, gt=0)


def load_settings() -> Settings:
    """Build Settings from the current environment, keeping defaults for unset keys."""
    values: dict[str, str] = {}
    if "UZCALC_LOG_LEVEL" in os.environ:
        values["log_level"] = os.environ["UZCALC_LOG_LEVEL"].upper()
    if "UZCALC_THOUSANDS_SEPARATOR" in os.environ:
        values["thousands_separator"] = os.environ["UZCALC_THOUSANDS_SEPARATOR"]
    if "UZCALC_MAX_TEXT_LENGTH" in os.environ:
        values["max_text_length"] = os.environ["UZCALC_MAX_TEXT_LENGTH"]
    return Settings.model_validate(values)
