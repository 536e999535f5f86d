"""Sunrise lookups and the concurrent two-city comparison."""

import math

import httpx

from playground.concurrency.join import join_pair
from playground.config import get_settings
from playground.errors import InputValidationError, UpstreamError
from playground.logging_config import logger
from playground.models.comparison import (
    CityView,
    ComparisonView,
    Failure,
    FailureKind,
    RequestLifecycle,
)
from playground.models.coordinates import Coordinates, city_name_for
from playground.models.sunrise import SunriseTimes, format_sunrise_time


def _to_float(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InputValidationError(
            "Please enter valid numeric coordinates for both cities."
        ) from exc
    if math.isnan(number):
        raise InputValidationError(
            "Please enter valid numeric coordinates for both cities."
        )
    return number


def parse_coordinates(latitude, longitude) -> Coordinates:
    """Validate a raw latitude/longitude pair.

    Args:
        latitude: Latitude as a number or numeric string.
        longitude: Longitude as a number or numeric string.

    Returns:
        A validated Coordinates model.

    Raises:
        InputValidationError: If either value is non-numeric or out of range.
    """
    lat = _to_float(latitude)
    lng = _to_float(longitude)
    if not -90 <= lat <= 90:
        raise InputValidationError("Latitude must be between -90 and 90 degrees.")
    if not -180 <= lng <= 180:
        raise InputValidationError("Longitude must be between -180 and 180 degrees.")
    return Coordinates(latitude=lat, longitude=lng)


async def fetch_sunrise(client: httpx.AsyncClient, coordinates: Coordinates) -> SunriseTimes:
    """Fetch sunrise and sunset times for one coordinate pair.

    Args:
        client: HTTP client used for the request.
        coordinates: Where to look up the sunrise.

    Returns:
        SunriseTimes for the coordinates.

    Raises:
        UpstreamError: On transport failure, a non-2xx response, a non-OK API
            status or an unexpected payload.
    """
    log_context = {"lat": coordinates.latitude, "lng": coordinates.longitude}
    prefix = (
        f"Failed to fetch sunrise data for coordinates "
        f"{coordinates.latitude}, {coordinates.longitude}"
    )
    logger.info("SUNRISE_REQUEST", **log_context)
    try:
        response = await client.get(
            get_settings().sunrise_api_url,
            params={
                "lat": coordinates.latitude,
                "lng": coordinates.longitude,
                "formatted": 0,
            },
        )
    except httpx.RequestError as exc:
        logger.error("SUNRISE_REQUEST_FAILED", **log_context, error=str(exc))
        raise UpstreamError(f"{prefix}: {exc!s}") from exc

    logger.info("SUNRISE_RESPONSE", **log_context, status=response.status_code)
    if not response.is_success:
        logger.error("SUNRISE_BAD_STATUS", **log_context, status=response.status_code)
        raise UpstreamError(
            f"{prefix}: HTTP Error: {response.status_code} - {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
        if data.get("status") != "OK":
            logger.error("SUNRISE_API_ERROR", **log_context, api_status=data.get("status"))
            raise UpstreamError(f"{prefix}: API Error: {data.get('status')}")
        return SunriseTimes.from_api_response(coordinates, data)
    except (ValueError, TypeError, KeyError, AttributeError) as exc:
        logger.error("SUNRISE_BAD_PAYLOAD", **log_context, error=str(exc))
        raise UpstreamError(f"{prefix}: Unexpected response payload") from exc


async def compare_sunrise_times(
    first: Coordinates,
    second: Coordinates,
    *,
    client: httpx.AsyncClient,
    lifecycle: RequestLifecycle,
) -> RequestLifecycle:
    """Fetch sunrise times for two places concurrently.

    The lifecycle enters ``loading`` before either lookup starts and leaves it
    exactly once: ``succeeded`` with both results in input order, or
    ``failed`` with the first lookup error. Cancellation and unexpected errors
    also fail the lifecycle before they propagate.

    Returns:
        The same lifecycle object, now finished.
    """
    logger.info("SUNRISE_COMPARISON_STARTED", first=str(first), second=str(second))
    lifecycle.start()
    try:
        results = await join_pair(
            fetch_sunrise(client, first), fetch_sunrise(client, second)
        )
    except UpstreamError as exc:
        logger.error("SUNRISE_COMPARISON_FAILED", error=str(exc))
        lifecycle.fail(Failure.from_exception(exc))
    except BaseException as exc:
        # Cancellation or a bug: still leave the loading state, then propagate.
        logger.error("SUNRISE_COMPARISON_ABORTED", error=repr(exc))
        lifecycle.fail(
            Failure(kind=FailureKind.upstream, message="Sunrise comparison was interrupted")
        )
        raise
    else:
        logger.info("SUNRISE_COMPARISON_SUCCEEDED")
        lifecycle.succeed(results)
    return lifecycle


async def submit_comparison(
    first_latitude,
    first_longitude,
    second_latitude,
    second_longitude,
    *,
    client: httpx.AsyncClient,
    lifecycle: RequestLifecycle | None = None,
) -> RequestLifecycle:
    """Validate raw form input, then run the comparison.

    Invalid input is recorded on the lifecycle without starting any request.
    """
    if lifecycle is None:
        lifecycle = RequestLifecycle()
    try:
        first = parse_coordinates(first_latitude, first_longitude)
        second = parse_coordinates(second_latitude, second_longitude)
    except InputValidationError as exc:
        logger.warning("SUNRISE_INPUT_REJECTED", error=str(exc))
        lifecycle.reject(Failure.from_exception(exc))
        return lifecycle
    return await compare_sunrise_times(first, second, client=client, lifecycle=lifecycle)


def render_comparison(lifecycle: RequestLifecycle) -> ComparisonView:
    """Turn a finished lifecycle into labelled output regions."""
    if lifecycle.results is None:
        return ComparisonView(status=lifecycle.status, error=lifecycle.error)
    return ComparisonView(
        status=lifecycle.status,
        cities=[
            CityView(
                name=city_name_for(result.coordinates),
                coordinates=str(result.coordinates),
                sunrise=format_sunrise_time(result.sunrise),
            )
            for result in lifecycle.results
        ],
    )


def view_lines(view: ComparisonView) -> list[str]:
    """Plain-text rendering of a comparison view."""
    if view.error is not None:
        return [f"Error: {view.error.message}"]
    lines = []
    for city in view.cities:
        lines.append(f"{city.name} ({city.coordinates}): sunrise at {city.sunrise} UTC")
    return lines
