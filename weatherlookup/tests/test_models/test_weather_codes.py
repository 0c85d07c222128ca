"""Tests for the weather code table."""

import pytest

from weatherlookup.models.weather_codes import (
    KNOWN_CODES,
    UNKNOWN,
    WEATHER_CODES,
    WeatherDescriptor,
    describe,
)


class TestDescribe:
    def test_clear_sky(self):
        assert describe(0) == WeatherDescriptor("Clear sky", "☀️")

    def test_slight_rain(self):
        assert describe(61) == WeatherDescriptor("Slight rain", "🌦️")

    def test_thunderstorm(self):
        assert describe(95) == WeatherDescriptor("Thunderstorm", "⛈️")

    @pytest.mark.parametrize("code", [1000, -1, 4, 100])
    def test_unknown_code_falls_back(self, code: int):
        d = describe(code)
        assert d == UNKNOWN
        assert d.description == "Unknown"
        assert d.icon == "❓"

    def test_none_falls_back(self):
        assert describe(None) == UNKNOWN

    def test_known_code_set(self):
        assert KNOWN_CODES == {
            0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
            71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99,
        }

    def test_selected_descriptions(self):
        assert describe(48).description == "Depositing rime fog"
        assert describe(75).icon == "❄️"
        assert describe(82).description == "Violent rain showers"
        assert describe(99).description == "Thunderstorm with heavy hail"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            WEATHER_CODES[1000] = UNKNOWN  # type: ignore[index]
