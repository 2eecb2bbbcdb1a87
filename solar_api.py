"""FastAPI application exposing solar ephemeris computations."""

from __future__ import annotations

import json
import logging
import time
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Annotated

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from models import ErrorResponse, HealthResponse, SolarQueryParams, SolarResponse
from solar.astro import gregorian_date_to_julian_day, julian_day_to_century
from solar.config import ConfigurationError, Settings, load_settings
from solar.strict import SolarRangeError, strict_solar_position

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("solar-api")

APP_DESCRIPTION = (
    "Solar position, distance and zenith angle from truncated Meeus series"
)

SETTINGS = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    global SETTINGS
    try:
        SETTINGS = load_settings()
    except ConfigurationError as exc:
        LOGGER.error(json.dumps({"event": "settings_failed", "error": str(exc)}))
        raise
    LOGGER.info(
        json.dumps({"event": "startup", "max_centuries": SETTINGS.max_centuries})
    )
    yield


app = FastAPI(
    title="Solar Ephemeris API",
    description=APP_DESCRIPTION,
    version="1.0.0",
    lifespan=lifespan,
)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, max_centuries=SETTINGS.max_centuries)


@app.get(
    "/solar",
    response_model=SolarResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def solar_endpoint(params: Annotated[SolarQueryParams, Query()]) -> SolarResponse:
    start_time = time.perf_counter()
    jd = gregorian_date_to_julian_day(
        params.date_utc.year,
        params.date_utc.month,
        params.date_utc.day + params.hour_utc / 24.0,
    )
    try:
        position = strict_solar_position(
            julian_day_to_century(jd), params.lat, SETTINGS.max_centuries
        )
    except SolarRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    duration_ms = (time.perf_counter() - start_time) * 1000.0

    response = SolarResponse(
        date_utc=params.date_utc,
        hour_utc=params.hour_utc,
        latitude=params.lat,
        **asdict(position),
    )

    LOGGER.info(
        json.dumps(
            {
                "event": "solar",
                "lat": params.lat,
                "date": params.date_utc.isoformat(),
                "hour_utc": params.hour_utc,
                "julian_day": position.julian_day,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response
