"""Application settings loaded from the environment and an optional .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIRECTORY = Path(__file__).parent


class Settings(BaseSettings):
    """Runtime settings, overridable with ``PLAYGROUND_*`` environment variables."""

    sunrise_api_url: str = "https://api.sunrise-sunset.org/json"
    placeholder_api_url: str = "https://jsonplaceholder.typicode.com"
    http_timeout_s: float = 5.0

    log_level: str = "INFO"
    log_json: bool = False

    countdown_ticks: int = 5
    countdown_interval_s: float = 1.0

    default_file: Path = PACKAGE_DIRECTORY / "files" / "data" / "example.txt"

    model_config = SettingsConfigDict(
        env_prefix="PLAYGROUND_", env_file=".env", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
