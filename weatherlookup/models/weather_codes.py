"""WMO weather interpretation codes mapped to a description and an icon."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class WeatherDescriptor:
    description: str
    icon: str


UNKNOWN = WeatherDescriptor("Unknown", "❓")

WEATHER_CODES = MappingProxyType({
    0: WeatherDescriptor("Clear sky", "☀️"),
    1: WeatherDescriptor("Mainly clear", "🌤️"),
    2: WeatherDescriptor("Partly cloudy", "⛅"),
    3: WeatherDescriptor("Overcast", "☁️"),
    45: WeatherDescriptor("Fog", "🌫️"),
    48: WeatherDescriptor("Depositing rime fog", "🌫️"),
    51: WeatherDescriptor("Light drizzle", "🌧️"),
    53: WeatherDescriptor("Moderate drizzle", "🌧️"),
    55: WeatherDescriptor("Dense drizzle", "🌧️"),
    56: WeatherDescriptor("Light freezing drizzle", "🌧️"),
    57: WeatherDescriptor("Dense freezing drizzle", "🌧️"),
    61: WeatherDescriptor("Slight rain", "🌦️"),
    63: WeatherDescriptor("Moderate rain", "🌦️"),
    65: WeatherDescriptor("Heavy rain", "🌧️"),
    66: WeatherDescriptor("Light freezing rain", "🌧️"),
    67: WeatherDescriptor("Heavy freezing rain", "🌧️"),
    71: WeatherDescriptor("Slight snow fall", "🌨️"),
    73: WeatherDescriptor("Moderate snow fall", "🌨️"),
    75: WeatherDescriptor("Heavy snow fall", "❄️"),
    77: WeatherDescriptor("Snow grains", "❄️"),
    80: WeatherDescriptor("Slight rain showers", "🌦️"),
    81: WeatherDescriptor("Moderate rain showers", "🌦️"),
    82: WeatherDescriptor("Violent rain showers", "🌧️"),
    85: WeatherDescriptor("Slight snow showers", "🌨️"),
    86: WeatherDescriptor("Heavy snow showers", "❄️"),
    95: WeatherDescriptor("Thunderstorm", "⛈️"),
    96: WeatherDescriptor("Thunderstorm with slight hail", "⛈️"),
    99: WeatherDescriptor("Thunderstorm with heavy hail", "⛈️"),
})

KNOWN_CODES: frozenset[int] = frozenset(WEATHER_CODES)


def describe(code: int | None) -> WeatherDescriptor:
    """Look up a weather code. Codes outside the table map to UNKNOWN."""
    return WEATHER_CODES.get(code, UNKNOWN)
