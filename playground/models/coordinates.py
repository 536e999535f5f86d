"""Coordinate pair model and the built-in city presets."""

from pydantic import BaseModel, Field

PRESET_TOLERANCE_DEG = 0.01


class Coordinates(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"


class CityPreset(BaseModel):
    """A named city with known coordinates."""

    name: str
    coordinates: Coordinates


def _preset(name: str, latitude: float, longitude: float) -> CityPreset:
    return CityPreset(
        name=name, coordinates=Coordinates(latitude=latitude, longitude=longitude)
    )


CITY_PRESETS = {
    "paris": _preset("Paris", 48.864716, 2.349014),
    "newyork": _preset("New York", 40.730610, -73.935242),
    "london": _preset("London", 51.507351, -0.127758),
    "tokyo": _preset("Tokyo", 35.676762, 139.650027),
    "sydney": _preset("Sydney", -33.865143, 151.209900),
    "dubai": _preset("Dubai", 25.276987, 55.296249),
}


def preset(key: str) -> CityPreset:
    """Look up a preset by key, ignoring case, spaces and hyphens.

    Raises:
        KeyError: If no preset matches.
    """
    normalized = key.lower().strip().replace(" ", "").replace("-", "")
    return CITY_PRESETS[normalized]


def city_name_for(coordinates: Coordinates) -> str:
    """Return the preset name near ``coordinates``, or the coordinates themselves."""
    for city in CITY_PRESETS.values():
        if (
            abs(city.coordinates.latitude - coordinates.latitude) < PRESET_TOLERANCE_DEG
            and abs(city.coordinates.longitude - coordinates.longitude)
            < PRESET_TOLERANCE_DEG
        ):
            return city.name
    return f"{coordinates.latitude:.4f}, {coordinates.longitude:.4f}"
