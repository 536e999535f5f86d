"""Sunrise model and time formatting helpers."""

from datetime import datetime, timezone

from pydantic import BaseModel

from playground.models.coordinates import Coordinates


class SunriseTimes(BaseModel):
    """Sunrise and sunset for one coordinate pair, as returned by the API."""

    sunrise: datetime
    sunset: datetime
    coordinates: Coordinates

    @classmethod
    def from_api_response(cls, coordinates: Coordinates, api_data: dict) -> "SunriseTimes":
        """Create a SunriseTimes model from a sunrise-sunset.org payload.

        Args:
            coordinates: The coordinates the payload was requested for.
            api_data: Payload fetched with ``formatted=0`` (ISO-8601 times).

        Returns:
            A populated SunriseTimes model.
        """
        results = api_data["results"]
        return cls(
            sunrise=datetime.fromisoformat(results["sunrise"]),
            sunset=datetime.fromisoformat(results["sunset"]),
            coordinates=coordinates,
        )


def format_sunrise_time(value: datetime | str) -> str:
    """Format a timestamp as ``HH:MM`` in UTC.

    Naive datetimes are taken to be UTC already. Unparseable input yields
    ``"Invalid Time"``.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return "Invalid Time"
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%H:%M")
