"""
Uzbek Voice Calculator — FastAPI Server
========================================

HTTP front for speech front-ends that already have a transcript.

Endpoints:
    POST /evaluate          Evaluate one Uzbek arithmetic phrase
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from uzcalc import __version__
from uzcalc.config import load_settings
from uzcalc.lexicon import CARDINALS, MAGNITUDES
from uzcalc.models import CalculationResult, Operator, Outcome
from uzcalc.pipeline import Calculator

load_dotenv()

settings = load_settings()
logging.basicConfig(level=settings.log_level)


# ─── Application Lifespan (pre-warm calculator) ─────────────────────

_calculator: Calculator | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the calculator once on startup."""
    global _calculator  # noqa: PLW0603
    _calculator = Calculator(thousands_separator=settings.thousands_separator)
    yield
    _calculator = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Uzbek Voice Calculator API",
    description=(
        "Evaluates spoken Uzbek arithmetic phrases such as \"ikki qo'sh uch\". "
        "One operator per phrase: addition, subtraction, multiplication or division."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class EvaluateRequest(BaseModel):
    """Request body for the /evaluate endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=settings.max_text_length,
        description="The recognized or typed Uzbek phrase.",
        json_schema_extra={"example": "bir ming besh yuz qo'sh yigirma besh"},
    )


class EvaluateResponse(BaseModel):
    """Tagged calculation result returned by the API."""

    transcript: str
    ok: bool
    outcome: Outcome
    value: Optional[Decimal] = None
    operator: Optional[Operator] = None
    left_value: Optional[Decimal] = None
    right_value: Optional[Decimal] = None
    display: str
    equation: Optional[str] = None
    message: Optional[str] = None

    model_config = {"json_schema_extra": {"example": {
        "transcript": "bir ming besh yuz qo'sh yigirma besh",
        "ok": True,
        "outcome": "NUMBER",
        "value": "1525",
        "operator": "+",
        "left_value": "1500",
        "right_value": "25",
        "display": "1 525",
        "equation": "1 500 + 25 = 1 525",
        "message": None,
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    cardinals_loaded: int
    magnitudes_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_calculator() -> Calculator:
    if _calculator is None:
        raise HTTPException(status_code=503, detail="Calculator not initialised")
    return _calculator


def _build_response(result: CalculationResult) -> EvaluateResponse:
    """Convert the internal CalculationResult to the API response schema."""
    return EvaluateResponse(ok=result.ok, **result.model_dump())


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/evaluate",
    summary="Evaluate an Uzbek arithmetic phrase",
    tags=["Calculation"],
    responses={503: {"description": "Calculator not yet initialised"}},
)
def evaluate_phrase(request: EvaluateRequest) -> EvaluateResponse:
    """Evaluate one phrase.

    Returns a tagged result:
    - **NUMBER**: `value` holds the answer
    - **DIVISION_BY_ZERO**: the right operand was zero; `value` is null
    - **OPERATOR_NOT_FOUND**: no operator word; `message` explains
    """
    calculator = _get_calculator()
    return _build_response(calculator.run(request.text))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Calculator not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and lexicon size."""
    _get_calculator()
    return HealthResponse(
        status="healthy",
        version=__version__,
        cardinals_loaded=len(CARDINALS),
        magnitudes_loaded=len(MAGNITUDES),
    )
