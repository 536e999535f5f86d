"""Models for ``GET /health``."""

from enum import Enum

from pydantic import BaseModel


class ServiceStatus(str, Enum):
    """Whether an upstream demo API answered its health request."""

    available = "available"
    not_available = "not_available"


class Dependencies(BaseModel):
    """Reachability of sunrise-sunset.org and JSONPlaceholder."""

    sunrise_api: ServiceStatus
    placeholder_api: ServiceStatus


class HealthResponse(BaseModel):
    """Health payload; ``status`` is "ok" whenever the app itself responds."""

    status: str
    dependencies: Dependencies
