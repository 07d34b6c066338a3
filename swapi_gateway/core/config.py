"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        swapi_base_url: Root URL of the upstream Star Wars API.
        swapi_timeout_seconds: Timeout applied to each upstream call.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "SWAPI Gateway"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    swapi_base_url: str = "https://swapi.dev/api"
    swapi_timeout_seconds: float = 10.0


settings = Settings()
