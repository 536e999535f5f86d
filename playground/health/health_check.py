"""Health checks for the external demo APIs."""

import httpx

from playground.config import get_settings
from playground.logging_config import logger
from playground.models.coordinates import CITY_PRESETS
from playground.models.health import ServiceStatus


async def is_sunrise_api_available() -> ServiceStatus:
    """Check that sunrise-sunset.org answers with an OK payload.

    Returns:
        ServiceStatus.available when the API responds, else not_available.
    """
    settings = get_settings()
    paris = CITY_PRESETS["paris"].coordinates
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout_s) as client:
            response = await client.get(
                settings.sunrise_api_url,
                params={"lat": paris.latitude, "lng": paris.longitude, "formatted": 0},
            )
            if response.status_code == 200:
                payload = response.json()
                if isinstance(payload, dict) and payload.get("status") == "OK":
                    return ServiceStatus.available
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("SUNRISE_API_UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
    logger.error("SUNRISE_API_UNAVAILABLE", status=response.status_code)
    return ServiceStatus.not_available


async def is_placeholder_api_available() -> ServiceStatus:
    """Check that JSONPlaceholder serves a single post.

    Returns:
        ServiceStatus.available when the API responds, else not_available.
    """
    settings = get_settings()
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout_s) as client:
            response = await client.get(
                f"{settings.placeholder_api_url.rstrip('/')}/posts/1"
            )
    except httpx.HTTPError as exc:
        logger.error("PLACEHOLDER_API_UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
    if response.status_code != 200:
        logger.error("PLACEHOLDER_API_UNAVAILABLE", status=response.status_code)
        return ServiceStatus.not_available
    return ServiceStatus.available
