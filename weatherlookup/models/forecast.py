"""Forecast data models for the Open-Meteo forecast endpoint."""

from dataclasses import dataclass, fields, replace
from datetime import date, datetime

from weatherlookup.errors import MalformedResponse
from weatherlookup.models.location import LocationCandidate


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float  # °C
    wind_speed: float  # km/h
    wind_direction: int  # degrees, 0-359
    weather_code: int
    observed_at: datetime


class _ParallelSeries:
    """Mixin for series made of equal-length tuples indexed by offset."""

    def __post_init__(self) -> None:
        lengths = {f.name: len(getattr(self, f.name)) for f in fields(self)}
        if len(set(lengths.values())) > 1:
            raise MalformedResponse(
                f"{type(self).__name__} fields differ in length: {lengths}"
            )

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class HourlySeries(_ParallelSeries):
    time: tuple[datetime, ...]
    temperature: tuple[float | None, ...]
    relative_humidity: tuple[float | None, ...]
    apparent_temperature: tuple[float | None, ...]
    precipitation_probability: tuple[float | None, ...]
    weather_code: tuple[int | None, ...]
    wind_speed: tuple[float | None, ...]


@dataclass(frozen=True)
class DailySeries(_ParallelSeries):
    time: tuple[date, ...]
    weather_code: tuple[int | None, ...]
    temperature_max: tuple[float | None, ...]
    temperature_min: tuple[float | None, ...]
    sunrise: tuple[datetime | None, ...]
    sunset: tuple[datetime | None, ...]


@dataclass(frozen=True)
class ForecastResult:
    current: CurrentConditions
    hourly: HourlySeries | None = None
    daily: DailySeries | None = None
    location: LocationCandidate | None = None
    timezone: str | None = None
    utc_offset_seconds: int = 0

    def with_location(self, location: LocationCandidate) -> "ForecastResult":
        return replace(self, location=location)
