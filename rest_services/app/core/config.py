"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so both
services start without any configuration, except that the weather
proxy needs ``WEATHER_API_KEY`` to get anything but errors back from
the upstream API.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "REST Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    weather_port: int = int(os.getenv("WEATHER_PORT", "8080"))
    products_port: int = int(os.getenv("PRODUCTS_PORT", "8081"))

    # Upstream weather API.  The key is appended to every outbound
    # request as the ``APPID`` query parameter and must never be
    # committed to the repository.
    weather_api_url: str = os.getenv(
        "WEATHER_API_URL", "http://api.openweathermap.org/data/2.5/weather"
    )
    weather_api_key: str = os.getenv("WEATHER_API_KEY", "")
    # Seconds to wait for the upstream; 0 (the default) waits forever.
    weather_timeout: float = float(os.getenv("WEATHER_TIMEOUT", "0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
