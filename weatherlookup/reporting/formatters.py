"""Output formatters for forecast results and geocoding candidates."""

import json
from datetime import datetime

from weatherlookup.models.forecast import ForecastResult
from weatherlookup.models.location import LocationCandidate
from weatherlookup.models.weather_codes import describe
from weatherlookup.reporting.derived import (
    NOT_AVAILABLE,
    current_humidity,
    current_hour_index,
    feels_like,
    today_summary,
    upcoming_hours,
    week_outlook,
)


def format_forecast_text(result: ForecastResult, now: datetime | None = None) -> str:
    """Plain text rendering for the terminal."""
    hour = current_hour_index(now)
    current = result.current
    weather = describe(current.weather_code)
    humidity = current_humidity(result, hour)

    lines = []
    if result.location is not None:
        lines.append(f"=== {result.location.label} ===")
    lines += [
        f"{weather.icon}  {_deg(current.temperature)}°C, {weather.description}",
        f"Feels like: {_deg(feels_like(result, hour))}°C | "
        f"Humidity: {humidity if humidity == NOT_AVAILABLE else f'{humidity:.0f}%'}",
        f"Wind: {_deg(current.wind_speed)} km/h from {current.wind_direction}°",
    ]

    today = today_summary(result)
    if today is not None:
        lines.append(
            f"Today: {_deg(today.temperature_max)}° / {_deg(today.temperature_min)}°C | "
            f"Sunrise {today.sunrise} | Sunset {today.sunset}"
        )

    slots = upcoming_hours(result)
    if slots:
        lines.append("Next hours:")
        for s in slots:
            precip = "" if s.precipitation_probability is None else f" {s.precipitation_probability:.0f}% rain"
            lines.append(f"  {s.label:>5} {s.descriptor.icon} {_deg(s.temperature)}°{precip}")

    days = week_outlook(result)
    if days:
        lines.append(f"{len(days)}-day forecast:")
        for d in days:
            lines.append(
                f"  {d.label:<9} {d.descriptor.icon} {d.descriptor.description:<30} "
                f"{_deg(d.temperature_max)}° / {_deg(d.temperature_min)}°"
            )

    lines.append(f"Updated: {current.observed_at.isoformat(timespec='minutes')}")
    return "\n".join(lines)


def format_forecast_json(result: ForecastResult) -> str:
    return json.dumps(forecast_to_dict(result), indent=2, ensure_ascii=False)


def forecast_to_dict(result: ForecastResult) -> dict:
    """JSON-ready dict, shaped after the provider's own field layout."""
    current = result.current
    weather = describe(current.weather_code)
    data: dict = {
        "timezone": result.timezone,
        "utc_offset_seconds": result.utc_offset_seconds,
        "current": {
            "temperature": current.temperature,
            "wind_speed": current.wind_speed,
            "wind_direction": current.wind_direction,
            "weather_code": current.weather_code,
            "description": weather.description,
            "icon": weather.icon,
            "observed_at": current.observed_at.isoformat(),
        },
        "location": candidate_to_dict(result.location) if result.location else None,
        "hourly": None,
        "daily": None,
    }
    if result.hourly is not None:
        h = result.hourly
        data["hourly"] = {
            "time": [t.isoformat() for t in h.time],
            "temperature": list(h.temperature),
            "relative_humidity": list(h.relative_humidity),
            "apparent_temperature": list(h.apparent_temperature),
            "precipitation_probability": list(h.precipitation_probability),
            "weather_code": list(h.weather_code),
            "wind_speed": list(h.wind_speed),
        }
    if result.daily is not None:
        d = result.daily
        data["daily"] = {
            "time": [t.isoformat() for t in d.time],
            "weather_code": list(d.weather_code),
            "temperature_max": list(d.temperature_max),
            "temperature_min": list(d.temperature_min),
            "sunrise": [_iso(t) for t in d.sunrise],
            "sunset": [_iso(t) for t in d.sunset],
        }
    return data


def candidate_to_dict(c: LocationCandidate) -> dict:
    return {
        "name": c.name,
        "country": c.country,
        "admin1": c.admin1,
        "latitude": c.latitude,
        "longitude": c.longitude,
        "timezone": c.timezone,
    }


def format_candidates_text(candidates: list[LocationCandidate]) -> str:
    return "\n".join(
        f"{i}. {c.label} ({c.latitude:.4f}, {c.longitude:.4f})"
        for i, c in enumerate(candidates, start=1)
    )


def _deg(value: float | None) -> str:
    return NOT_AVAILABLE if value is None else str(round(value))


def _iso(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat()
