# ABOUTME: Tests for the presentation mapper.
# ABOUTME: Covers icon rule ordering, day/night selection, and temperature and place formatting.

import pytest

from weather_widget.models import CurrentObservation, LocationMetadata, WeatherCondition
from weather_widget.presentation import (
    WeatherIcon,
    format_location,
    format_temperature,
    icon_alt_text,
    render_view,
    select_day_night_icon,
    select_weather_icon,
)


def _obs(text: str, is_day: int = 1, temp_c=20, temp_f=68) -> CurrentObservation:
    return CurrentObservation(temp_c=temp_c, temp_f=temp_f, is_day=is_day, condition=WeatherCondition(text=text))


class TestSelectWeatherIcon:
    @pytest.mark.parametrize(
        "text,is_day,expected",
        [
            ("Cloudy", 1, WeatherIcon.CLOUDY),
            ("Partly cloudy", 0, WeatherIcon.CLOUDY),
            ("Partly sunny", 1, WeatherIcon.PARTLY_CLOUDY),
            ("Sunny", 1, WeatherIcon.SUNNY),
            ("Clear", 1, WeatherIcon.SUNNY),
            ("Clear", 0, WeatherIcon.NIGHT),
            ("Light rain", 0, WeatherIcon.NIGHT),
            ("Light snow", 1, WeatherIcon.SNOW),
            ("Mist", 1, WeatherIcon.PARTLY_CLOUDY),
        ],
    )
    def test_first_matching_rule_wins(self, text, is_day, expected):
        """select_weather_icon applies its rules in order, first match wins.

        Implementation: Runs representative condition/day combinations through the mapper.
        Passing implies: Rule priority is cloudy, partly, sunny/clear by day, night, snow, default.
        """
        assert select_weather_icon(_obs(text, is_day)) == expected

    def test_snow_at_night_shows_night(self):
        """Snow at night selects the night icon because the night rule comes first.

        Implementation: Snow condition with is_day 0.
        Passing implies: The existing rule order is kept, snow is only reachable by day.
        """
        assert select_weather_icon(_obs("Heavy snow", is_day=0)) == WeatherIcon.NIGHT

    def test_matching_is_case_insensitive(self):
        assert select_weather_icon(_obs("SUNNY")) == WeatherIcon.SUNNY

    def test_nothing_loaded_shows_night(self):
        assert select_weather_icon(None) == WeatherIcon.NIGHT


class TestDayNightIcon:
    def test_day(self):
        assert select_day_night_icon(_obs("Mist", is_day=1)) == WeatherIcon.SUNNY

    def test_night(self):
        assert select_day_night_icon(_obs("Sunny", is_day=0)) == WeatherIcon.NIGHT

    def test_nothing_loaded(self):
        assert select_day_night_icon(None) == WeatherIcon.NIGHT


class TestIconAssets:
    def test_assets_and_glyphs_cover_every_icon(self):
        for icon in WeatherIcon:
            assert icon.asset.startswith("/images/Icon=")
            assert icon.glyph

    def test_partly_cloudy_asset(self):
        assert WeatherIcon.PARTLY_CLOUDY.asset == "/images/Icon=Partly Cloudy.svg"


class TestFormatting:
    def test_temperature_with_integers(self):
        assert format_temperature(_obs("Sunny")) == "20°C / 68°F"

    def test_temperature_whole_floats_drop_decimal(self):
        assert format_temperature(_obs("Sunny", temp_c=20.0, temp_f=68.0)) == "20°C / 68°F"

    def test_temperature_keeps_fractions(self):
        assert format_temperature(_obs("Clear", temp_c=11.5, temp_f=52.7)) == "11.5°C / 52.7°F"

    def test_temperature_defaults_to_zero(self):
        """Temperatures read 0 when nothing has loaded yet.

        Implementation: Formats with no observation.
        Passing implies: Unknown and zero degrees render identically.
        """
        assert format_temperature(None) == "0°C / 0°F"

    def test_location(self):
        assert format_location(LocationMetadata(name="Paris", country="France")) == "Paris / France"

    def test_location_placeholders(self):
        assert format_location(None) == "City / Country"

    def test_location_empty_fields_use_placeholders(self):
        assert format_location(LocationMetadata(name="", country="")) == "City / Country"

    def test_alt_text(self):
        assert icon_alt_text(_obs("Partly Cloudy")) == "partly cloudy"
        assert icon_alt_text(None) == "Weather"


class TestRenderView:
    def test_loaded_view(self):
        """render_view bundles every display value for a loaded observation.

        Implementation: Renders a sunny daytime Paris observation.
        Passing implies: The widget shows 20°C / 68°F, Paris / France, and the sunny icon.
        """
        view = render_view(_obs("Sunny"), LocationMetadata(name="Paris", country="France"))
        assert view.icon == WeatherIcon.SUNNY
        assert view.day_night_icon == WeatherIcon.SUNNY
        assert view.temperature == "20°C / 68°F"
        assert view.place == "Paris / France"
        assert view.icon_alt == "sunny"

    def test_empty_view(self):
        view = render_view(None, None)
        assert view.temperature == "0°C / 0°F"
        assert view.place == "City / Country"
        assert view.icon_alt == "Weather"
