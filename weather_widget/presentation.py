# ABOUTME: Pure mapping from widget result state to icons and display strings.
# ABOUTME: Selects the condition and day/night icons and formats temperature and place lines.

from enum import Enum

from pydantic import BaseModel

from weather_widget.models import CurrentObservation, LocationMetadata


class WeatherIcon(str, Enum):
    CLOUDY = "cloudy"
    PARTLY_CLOUDY = "partly-cloudy"
    SUNNY = "sunny"
    NIGHT = "night"
    SNOW = "snow"

    @property
    def asset(self) -> str:
        return _ASSETS[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_ASSETS = {
    WeatherIcon.CLOUDY: "/images/Icon=Cloudy.svg",
    WeatherIcon.PARTLY_CLOUDY: "/images/Icon=Partly Cloudy.svg",
    WeatherIcon.SUNNY: "/images/Icon=Sunny.svg",
    WeatherIcon.NIGHT: "/images/Icon=Night.svg",
    WeatherIcon.SNOW: "/images/Icon=Snow.svg",
}

_GLYPHS = {
    WeatherIcon.CLOUDY: "☁",
    WeatherIcon.PARTLY_CLOUDY: "⛅",
    WeatherIcon.SUNNY: "☀",
    WeatherIcon.NIGHT: "☾",
    WeatherIcon.SNOW: "❄",
}


class WidgetView(BaseModel):
    """Everything the widget displays for one render."""

    icon: WeatherIcon
    icon_alt: str
    day_night_icon: WeatherIcon
    temperature: str
    place: str


def _condition_text(current: CurrentObservation | None) -> str:
    if current is None or not current.condition.text:
        return ""
    return current.condition.text.lower()


def _is_daytime(current: CurrentObservation | None) -> bool:
    return current is not None and current.is_daytime


def select_weather_icon(current: CurrentObservation | None) -> WeatherIcon:
    """Pick the primary icon. First matching rule wins.

    At night the night icon is returned before the snow check is reached.
    """
    condition = _condition_text(current)
    is_day = _is_daytime(current)

    if "cloudy" in condition:
        return WeatherIcon.CLOUDY
    if "partly" in condition:
        return WeatherIcon.PARTLY_CLOUDY
    if "sunny" in condition and is_day:
        return WeatherIcon.SUNNY
    if "clear" in condition and is_day:
        return WeatherIcon.SUNNY
    if not is_day:
        return WeatherIcon.NIGHT
    if "snow" in condition:
        return WeatherIcon.SNOW
    return WeatherIcon.PARTLY_CLOUDY


def select_day_night_icon(current: CurrentObservation | None) -> WeatherIcon:
    return WeatherIcon.SUNNY if _is_daytime(current) else WeatherIcon.NIGHT


def icon_alt_text(current: CurrentObservation | None) -> str:
    return _condition_text(current) or "Weather"


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(current: CurrentObservation | None) -> str:
    """Celsius and Fahrenheit line; both read 0 before anything has loaded."""
    temp_c = current.temp_c if current is not None else 0
    temp_f = current.temp_f if current is not None else 0
    return f"{_format_number(temp_c)}°C / {_format_number(temp_f)}°F"


def format_location(location: LocationMetadata | None) -> str:
    name = location.name if location is not None else ""
    country = location.country if location is not None else ""
    return f"{name or 'City'} / {country or 'Country'}"


def render_view(current: CurrentObservation | None, location: LocationMetadata | None) -> WidgetView:
    return WidgetView(
        icon=select_weather_icon(current),
        icon_alt=icon_alt_text(current),
        day_night_icon=select_day_night_icon(current),
        temperature=format_temperature(current),
        place=format_location(location),
    )
