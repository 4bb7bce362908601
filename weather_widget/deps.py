# ABOUTME: Settings and dependency construction for the weather widget using Pydantic BaseModel.
# ABOUTME: Reads the API key and tuning values from the environment and builds the httpx.AsyncClient.

import logging
import os

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from weather_widget.weather_service import CURRENT_URL

DEFAULT_QUERY = "netrakona"
DEBOUNCE_SECONDS = 0.8

# Settings field -> environment variable
ENV_VARS = {
    "api_key": "WEATHER_API_KEY",
    "api_url": "WEATHER_API_URL",
    "default_query": "WEATHER_DEFAULT_QUERY",
    "debounce_seconds": "WEATHER_DEBOUNCE_SECONDS",
    "log_level": "LOG_LEVEL",
}


class WidgetSettings(BaseModel):
    """Runtime configuration for the widget and its CLI."""

    api_key: str | None = None
    api_url: str = CURRENT_URL
    default_query: str = DEFAULT_QUERY
    debounce_seconds: float = Field(default=DEBOUNCE_SECONDS, ge=0)
    log_level: str = "WARNING"

    @field_validator("api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, value):
        return value or None

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls) -> "WidgetSettings":
        """Build settings from environment variables, loading a local .env file first.

        Raw strings are validated by the model, so a bad value fails with the field name.
        A missing WEATHER_API_KEY is not an error here; the widget logs it and skips fetching.
        """
        load_dotenv()
        return cls.model_validate({field: os.environ[var] for field, var in ENV_VARS.items() if var in os.environ})


def create_http_client() -> httpx.AsyncClient:
    """Create a plain httpx client. Failed requests are logged by the caller, never retried."""
    return httpx.AsyncClient()
