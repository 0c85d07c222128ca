"""Display values derived from a ForecastResult.

These encode display policy rather than formatting: what to show when a
value is missing, and which hourly slot counts as "now".
"""

from dataclasses import dataclass
from datetime import datetime

from weatherlookup.models.forecast import ForecastResult
from weatherlookup.models.weather_codes import WeatherDescriptor, describe

NOT_AVAILABLE = "N/A"

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class TodaySummary:
    temperature_max: float | None
    temperature_min: float | None
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class HourSlot:
    label: str  # "14:00"
    temperature: float | None
    precipitation_probability: float | None
    descriptor: WeatherDescriptor


@dataclass(frozen=True)
class DayOutlook:
    label: str  # "Today" or weekday name
    descriptor: WeatherDescriptor
    temperature_max: float | None
    temperature_min: float | None


def current_hour_index(now: datetime | None = None) -> int:
    """Hourly index for "now", taken from the caller's local wall clock.

    This is an approximation: hourly.time is not consulted, so when the
    caller's timezone differs from the forecast's, the slot can be off.
    """
    if now is None:
        now = datetime.now()
    return now.hour


def feels_like(result: ForecastResult, hour_index: int) -> float:
    """Apparent temperature for the hour, else the current temperature."""
    value = _hourly_value(result, "apparent_temperature", hour_index)
    if value is None:
        return result.current.temperature
    return value


def current_humidity(result: ForecastResult, hour_index: int) -> float | str:
    """Relative humidity for the hour, or "N/A". Never coerced to 0."""
    value = _hourly_value(result, "relative_humidity", hour_index)
    if value is None:
        return NOT_AVAILABLE
    return value


def today_summary(result: ForecastResult) -> TodaySummary | None:
    daily = result.daily
    if daily is None or len(daily) == 0:
        return None
    return TodaySummary(
        temperature_max=daily.temperature_max[0],
        temperature_min=daily.temperature_min[0],
        sunrise=_clock(daily.sunrise[0]),
        sunset=_clock(daily.sunset[0]),
    )


def upcoming_hours(result: ForecastResult, count: int = 8) -> list[HourSlot]:
    hourly = result.hourly
    if hourly is None:
        return []
    return [
        HourSlot(
            label=f"{hourly.time[i].hour}:00",
            temperature=hourly.temperature[i],
            precipitation_probability=hourly.precipitation_probability[i],
            descriptor=describe(hourly.weather_code[i]),
        )
        for i in range(min(count, len(hourly)))
    ]


def week_outlook(result: ForecastResult) -> list[DayOutlook]:
    daily = result.daily
    if daily is None:
        return []
    return [
        DayOutlook(
            label="Today" if i == 0 else WEEKDAYS[day.weekday()],
            descriptor=describe(daily.weather_code[i]),
            temperature_max=daily.temperature_max[i],
            temperature_min=daily.temperature_min[i],
        )
        for i, day in enumerate(daily.time)
    ]


def _hourly_value(result: ForecastResult, field: str, index: int) -> float | None:
    hourly = result.hourly
    if hourly is None or not 0 <= index < len(hourly):
        return None
    return getattr(hourly, field)[index]


def _clock(value: datetime | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    return value.strftime("%H:%M")
