"""Open-Meteo forecast client: coordinates to current, hourly and daily data."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable

import httpx

from weatherlookup.errors import InvalidInput, MalformedResponse
from weatherlookup.ingest.transport import DEFAULT_USER_AGENT, get_json
from weatherlookup.models.forecast import (
    CurrentConditions,
    DailySeries,
    ForecastResult,
    HourlySeries,
)
from weatherlookup.models.location import Coordinates

logger = logging.getLogger(__name__)

OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1"
MAX_FORECAST_DAYS = 16

# Provider field name -> HourlySeries attribute. Requested in this order.
HOURLY_FIELDS: dict[str, str] = {
    "temperature_2m": "temperature",
    "relativehumidity_2m": "relative_humidity",
    "apparent_temperature": "apparent_temperature",
    "precipitation_probability": "precipitation_probability",
    "weathercode": "weather_code",
    "windspeed_10m": "wind_speed",
}

DAILY_FIELDS: dict[str, str] = {
    "weathercode": "weather_code",
    "temperature_2m_max": "temperature_max",
    "temperature_2m_min": "temperature_min",
    "sunrise": "sunrise",
    "sunset": "sunset",
}


@dataclass(frozen=True)
class ForecastOptions:
    include_hourly: bool = True
    include_daily: bool = True
    forecast_days: int = 7
    timezone: str = "auto"  # let the provider infer it from the coordinates

    def __post_init__(self) -> None:
        if isinstance(self.forecast_days, bool) or not isinstance(self.forecast_days, int):
            raise InvalidInput(f"forecast_days must be an integer, got {self.forecast_days!r}")
        if not 1 <= self.forecast_days <= MAX_FORECAST_DAYS:
            raise InvalidInput(
                f"forecast_days {self.forecast_days} outside [1, {MAX_FORECAST_DAYS}]"
            )
        if not self.timezone or not self.timezone.strip():
            raise InvalidInput("timezone must be non-empty")


class ForecastClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_FORECAST_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.client = client

    async def fetch(
        self, coords: Coordinates, options: ForecastOptions | None = None
    ) -> ForecastResult:
        """Fetch the forecast for a point.

        The current block is always present; hourly and daily series are
        present exactly when requested in options.
        """
        options = options or ForecastOptions()
        data = await get_json(
            f"{self.base_url}/forecast",
            build_params(coords, options),
            timeout=self.timeout,
            user_agent=self.user_agent,
            client=self.client,
        )
        return parse_forecast(data, options)


def build_params(coords: Coordinates, options: ForecastOptions) -> dict[str, Any]:
    params: dict[str, Any] = {
        "latitude": coords.latitude,
        "longitude": coords.longitude,
        "current_weather": "true",
    }
    if options.include_hourly:
        params["hourly"] = ",".join(HOURLY_FIELDS)
    if options.include_daily:
        params["daily"] = ",".join(DAILY_FIELDS)
    params["timezone"] = options.timezone
    params["forecast_days"] = options.forecast_days
    return params


def parse_forecast(data: dict, options: ForecastOptions) -> ForecastResult:
    """Normalize a raw forecast body. Missing pieces raise MalformedResponse."""
    hourly = None
    daily = None
    if options.include_hourly:
        hourly = _parse_hourly(_require_block(data, "hourly"))
    if options.include_daily:
        daily = _parse_daily(_require_block(data, "daily"))

    return ForecastResult(
        current=_parse_current(_require_block(data, "current_weather")),
        hourly=hourly,
        daily=daily,
        timezone=data.get("timezone"),
        utc_offset_seconds=_utc_offset(data),
    )


def _utc_offset(data: dict) -> int:
    try:
        return int(data.get("utc_offset_seconds") or 0)
    except (TypeError, ValueError) as e:
        raise MalformedResponse(f"Invalid utc_offset_seconds: {e!r}") from e


def _require_block(data: dict, key: str) -> dict:
    block = data.get(key)
    if not isinstance(block, dict):
        logger.error("Forecast response missing %r block", key)
        raise MalformedResponse(f"Forecast response missing {key!r}")
    return block


def _parse_current(raw: dict) -> CurrentConditions:
    try:
        return CurrentConditions(
            temperature=float(raw["temperature"]),
            wind_speed=float(raw["windspeed"]),
            wind_direction=int(raw["winddirection"]) % 360,
            weather_code=int(raw["weathercode"]),
            observed_at=datetime.fromisoformat(raw["time"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Invalid current_weather block: {e!r}") from e


def _parse_hourly(raw: dict) -> HourlySeries:
    columns = {"time": _column(raw, "hourly", "time", datetime.fromisoformat, nullable=False)}
    for field, attr in HOURLY_FIELDS.items():
        convert = int if field == "weathercode" else float
        columns[attr] = _column(raw, "hourly", field, convert)
    return HourlySeries(**columns)


def _parse_daily(raw: dict) -> DailySeries:
    columns = {"time": _column(raw, "daily", "time", date.fromisoformat, nullable=False)}
    for field, attr in DAILY_FIELDS.items():
        if field in ("sunrise", "sunset"):
            convert = datetime.fromisoformat
        elif field == "weathercode":
            convert = int
        else:
            convert = float
        columns[attr] = _column(raw, "daily", field, convert)
    return DailySeries(**columns)


def _column(
    raw: dict,
    block: str,
    field: str,
    convert: Callable[[Any], Any],
    nullable: bool = True,
) -> tuple:
    values = raw.get(field)
    if not isinstance(values, list):
        raise MalformedResponse(f"{block}.{field} missing or not a list")
    try:
        return tuple(
            None if v is None and nullable else convert(v)
            for v in values
        )
    except (TypeError, ValueError) as e:
        raise MalformedResponse(f"{block}.{field} has invalid values: {e!r}") from e
