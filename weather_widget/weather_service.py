# ABOUTME: Service layer for WeatherAPI.com current-conditions calls and response parsing.
# ABOUTME: Issues the current.json request and validates the body into a CurrentWeatherPayload.

from typing import Any

import httpx
from pydantic import ValidationError

from weather_widget.models import CurrentWeatherPayload

CURRENT_URL = "https://api.weatherapi.com/v1/current.json"


async def fetch_current(
    client: httpx.AsyncClient,
    api_key: str,
    query: str,
    url: str = CURRENT_URL,
) -> Any:
    """Fetch current conditions (with air quality) for a free-text location query.

    The HTTP status is not checked: provider error bodies are returned as-is and
    rejected later by `parse_current_payload`.
    """
    resp = await client.get(url, params={"key": api_key, "q": query, "aqi": "yes"})
    return resp.json()


def parse_current_payload(data: Any) -> CurrentWeatherPayload | None:
    """Validate a decoded body, returning None when `current` or `location` is missing or malformed."""
    if not isinstance(data, dict) or not data.get("current") or not data.get("location"):
        return None
    try:
        return CurrentWeatherPayload.model_validate(data)
    except ValidationError:
        return None
