# ABOUTME: Pydantic BaseModels for the WeatherAPI.com current-conditions response.
# ABOUTME: Defines the observation, location, and payload types held by the widget state.

from pydantic import BaseModel


class WeatherCondition(BaseModel):
    """Condition description and optional provider icon reference."""

    text: str
    icon: str | None = None


class CurrentObservation(BaseModel):
    """Current weather snapshot from the `current` block of the response."""

    temp_c: int | float
    temp_f: int | float
    is_day: int
    condition: WeatherCondition

    @property
    def is_daytime(self) -> bool:
        return self.is_day == 1


class LocationMetadata(BaseModel):
    """Resolved place from the `location` block of the response."""

    name: str
    country: str


class CurrentWeatherPayload(BaseModel):
    """A well-formed current.json body: both blocks present and valid."""

    current: CurrentObservation
    location: LocationMetadata
