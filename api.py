"""
NumWordify — FastAPI Server
===========================

RESTful API for converting amounts to words.

Endpoints:
    POST /convert           Convert an amount using a bundled locale
    POST /convert/custom    Convert an amount using a locale definition in the body
    GET  /locales           List available locale keys
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from numwordify import __version__
from numwordify.converter import compose, render_amount
from numwordify.exceptions import NumWordifyError
from numwordify.locales import (
    available_locales,
    default_locale,
    get_config,
    normalize_locale_key,
)
from numwordify.models import CurrencyNames, LocaleConfig
from numwordify.validators import parse_config

load_dotenv()


# ─── Application Lifespan (pre-warm default locale) ─────────────────

_locales: list[str] | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Discover locale files and load the default locale on startup."""
    global _locales  # noqa: PLW0603
    _locales = available_locales()
    get_config(default_locale())
    yield
    _locales = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="NumWordify API",
    description=(
        "Convert amounts to words in any configured locale. "
        "Word tables, elision rules and currency templates come from "
        "per-locale JSON definitions."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Error Mapping ───────────────────────────────────────────────────

_STATUS_BY_CODE = {
    "LOCALE_NOT_FOUND": 404,
    "CONFIG_INVALID": 422,
    "MAGNITUDE_OUT_OF_RANGE": 422,
    "INVALID_AMOUNT": 422,
}


@app.exception_handler(NumWordifyError)
async def _conversion_error_handler(request: Request, exc: NumWordifyError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(exc.code, 500),
        content={"code": exc.code, "message": exc.message, "details": exc.details},
    )


# ─── Request / Response Schemas ─────────────────────────────────────


class CurrencyIn(BaseModel):
    major: str = Field(..., min_length=1)
    minor: str = Field(..., min_length=1)


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    amount: Decimal = Field(..., description="Amount to convert; up to 2 decimals are kept.")
    locale: Optional[str] = Field(
        None, description="Culture code such as 'en-US'. Defaults to the server locale."
    )
    include_currency: bool = True
    currency: Optional[CurrencyIn] = Field(
        None, description="Overrides the locale's major/minor unit names."
    )

    model_config = {"json_schema_extra": {"example": {
        "amount": "1234.56",
        "locale": "en-US",
        "include_currency": True,
    }}}


class CustomConvertRequest(BaseModel):
    """Request body for /convert/custom: the locale definition travels inline."""

    amount: Decimal
    config: dict[str, Any] = Field(..., description="Locale definition, same shape as the JSON files.")
    include_currency: bool = True


class ConvertResponse(BaseModel):
    text: str
    whole_words: str
    decimal_words: str
    negative: bool
    locale: Optional[str] = None


class LocalesResponse(BaseModel):
    default: str
    locales: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    locales_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_locales() -> list[str]:
    if _locales is None:
        raise HTTPException(status_code=503, detail="Locales not initialised")
    return _locales


def _build_response(
    amount: Decimal,
    config: LocaleConfig,
    include_currency: bool,
    currency: CurrencyNames | None = None,
    locale: str | None = None,
) -> ConvertResponse:
    parts = render_amount(amount, config)
    return ConvertResponse(
        text=compose(parts, config, currency, include_currency),
        whole_words=parts.whole_words,
        decimal_words=parts.decimal_words,
        negative=parts.negative,
        locale=locale,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert an amount to words",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown locale"},
        422: {"description": "Amount out of range for the locale"},
    },
)
def convert_amount(request: ConvertRequest) -> ConvertResponse:
    """Convert an amount using one of the server's locale definitions.

    - **text**: the full phrase (currency or plain number template)
    - **whole_words** / **decimal_words**: the two rendered halves
    - **negative**: whether the negative word was prepended
    """
    locale = request.locale or default_locale()
    config = get_config(locale)
    currency = (
        CurrencyNames(major=request.currency.major, minor=request.currency.minor)
        if request.currency
        else None
    )
    return _build_response(
        request.amount, config, request.include_currency, currency, normalize_locale_key(locale)
    )


@app.post(
    "/convert/custom",
    summary="Convert an amount with an inline locale definition",
    tags=["Conversion"],
    responses={422: {"description": "Invalid locale definition or amount"}},
)
def convert_amount_custom(request: CustomConvertRequest) -> ConvertResponse:
    """Validate the supplied locale definition, then convert with it."""
    config = parse_config(request.config, source="request body")
    return _build_response(request.amount, config, request.include_currency)


@app.get("/locales", summary="List available locales", tags=["Locales"])
def list_locales() -> LocalesResponse:
    return LocalesResponse(default=default_locale(), locales=_get_locales())


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Locales not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        locales_loaded=len(_get_locales()),
    )
