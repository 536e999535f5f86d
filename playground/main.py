"""FastAPI application routes, middleware, and metrics."""

import time
import uuid
from datetime import datetime

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from structlog.contextvars import bind_contextvars, clear_contextvars

from playground.concurrency.join import join_pair
from playground.config import get_settings
from playground.countdown.new_year import detailed_countdown
from playground.health.health_check import (
    is_placeholder_api_available,
    is_sunrise_api_available,
)
from playground.logging_config import logger
from playground.models.comparison import ComparisonView, FailureKind, RequestStatus
from playground.models.coordinates import CITY_PRESETS, CityPreset
from playground.models.countdown import DetailedCountdown
from playground.models.health import Dependencies, HealthResponse
from playground.sunrise_service.sunrise import render_comparison, submit_comparison

app = FastAPI(title="playground")

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["path"]
)

FAILURE_STATUS_CODES = {FailureKind.validation: 422, FailureKind.upstream: 502}


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Log request details, attach a request ID, and record metrics.

    Args:
        request: Incoming HTTP request.
        call_next: FastAPI handler for the next middleware/app.

    Returns:
        The response produced by the downstream handler.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
    finally:
        duration_s = time.perf_counter() - start
        status_code = getattr(response, "status_code", 500)
        logger.info(
            "HTTP_REQUEST",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round(duration_s * 1000, 2),
        )
        REQUEST_COUNT.labels(
            method=request.method, path=request.url.path, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(path=request.url.path).observe(duration_s)
        clear_contextvars()


@app.get("/")
async def root():
    """Return a basic liveness response."""
    return {"message": "Hello World"}


@app.get("/sunrise/presets")
async def sunrise_presets() -> dict[str, CityPreset]:
    return CITY_PRESETS


@app.get("/sunrise/compare", response_model=ComparisonView)
async def compare_sunrise(lat1: str, lng1: str, lat2: str, lng2: str):
    """Compare sunrise times for two coordinate pairs.

    Coordinates arrive as raw strings so that non-numeric input is reported
    with the same message as out-of-range input.

    Returns:
        The rendered comparison; failed comparisons keep the same body shape
        with a 422 (validation) or 502 (upstream) status.
    """
    async with httpx.AsyncClient(timeout=get_settings().http_timeout_s) as client:
        lifecycle = await submit_comparison(lat1, lng1, lat2, lng2, client=client)
    view = render_comparison(lifecycle)
    if lifecycle.status is RequestStatus.failed:
        return JSONResponse(
            status_code=FAILURE_STATUS_CODES[lifecycle.error.kind],
            content=view.model_dump(mode="json"),
        )
    return view


@app.get("/countdown")
async def countdown() -> DetailedCountdown:
    """Time remaining until the next January 1st, server local time."""
    return detailed_countdown(datetime.now())


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report API health and dependency availability.

    Returns:
        A HealthResponse containing dependency status.
    """
    sunrise_api, placeholder_api = await join_pair(
        is_sunrise_api_available(), is_placeholder_api_available()
    )
    return HealthResponse(
        status="ok",
        dependencies=Dependencies(
            sunrise_api=sunrise_api, placeholder_api=placeholder_api
        ),
    )


@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics for scraping."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
