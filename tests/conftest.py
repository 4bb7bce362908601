# ABOUTME: Shared test fixtures for the weather widget test suite.
# ABOUTME: Provides widget settings and sample current.json payloads.

import pytest

from weather_widget.deps import WidgetSettings


@pytest.fixture
def settings() -> WidgetSettings:
    return WidgetSettings(api_key="test-key", debounce_seconds=0.05)


@pytest.fixture
def paris_payload() -> dict:
    return {
        "location": {"name": "Paris", "country": "France"},
        "current": {"temp_c": 20, "temp_f": 68, "is_day": 1, "condition": {"text": "Sunny"}},
    }


@pytest.fixture
def london_payload() -> dict:
    return {
        "location": {"name": "London", "country": "United Kingdom"},
        "current": {
            "temp_c": 11.5,
            "temp_f": 52.7,
            "is_day": 0,
            "condition": {"text": "Clear", "icon": "//cdn.weatherapi.com/weather/64x64/night/113.png"},
        },
    }
