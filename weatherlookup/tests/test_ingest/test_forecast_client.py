"""Tests for the forecast client with mocked httpx."""

from dataclasses import fields
from datetime import date, datetime

import httpx
import pytest
import respx

from weatherlookup.errors import InvalidInput, MalformedResponse, NetworkError, ProviderError
from weatherlookup.ingest.forecast_client import (
    DAILY_FIELDS,
    HOURLY_FIELDS,
    ForecastClient,
    ForecastOptions,
    parse_forecast,
)
from weatherlookup.models.location import Coordinates

FORECAST_URL = "https://test-forecast.example.com/v1/forecast"
ILORIN = Coordinates(8.49664, 4.54214)


def _series_lengths(series) -> set[int]:
    return {len(getattr(series, f.name)) for f in fields(series)}


class TestFetch:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, forecaster: ForecastClient, forecast_payload: dict):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        result = await forecaster.fetch(ILORIN)

        assert result.current.temperature == 29.4
        assert result.current.wind_speed == 9.7
        assert result.current.wind_direction == 212
        assert result.current.weather_code == 2
        assert result.current.observed_at == datetime(2026, 10, 17, 13, 0)
        assert result.timezone == "Africa/Lagos"
        assert result.utc_offset_seconds == 3600
        assert result.location is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_series_have_equal_lengths(
        self, forecaster: ForecastClient, forecast_payload: dict
    ):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        result = await forecaster.fetch(ILORIN)

        assert result.hourly is not None
        assert result.daily is not None
        assert _series_lengths(result.hourly) == {24}
        assert _series_lengths(result.daily) == {7}
        assert result.hourly.time[1] == datetime(2026, 10, 17, 1, 0)
        assert result.daily.time[0] == date(2026, 10, 17)
        assert result.daily.sunrise[0] == datetime(2026, 10, 17, 6, 41)
        assert result.hourly.weather_code[17] == 95

    @pytest.mark.asyncio
    @respx.mock
    async def test_default_query_params(
        self, forecaster: ForecastClient, forecast_payload: dict
    ):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        await forecaster.fetch(ILORIN)

        params = route.calls.last.request.url.params
        assert params["latitude"] == "8.49664"
        assert params["longitude"] == "4.54214"
        assert params["current_weather"] == "true"
        assert params["hourly"] == (
            "temperature_2m,relativehumidity_2m,apparent_temperature,"
            "precipitation_probability,weathercode,windspeed_10m"
        )
        assert params["daily"] == (
            "weathercode,temperature_2m_max,temperature_2m_min,sunrise,sunset"
        )
        assert params["timezone"] == "auto"
        assert params["forecast_days"] == "7"

    @pytest.mark.asyncio
    @respx.mock
    async def test_current_only(self, forecaster: ForecastClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        options = ForecastOptions(include_hourly=False, include_daily=False)

        result = await forecaster.fetch(ILORIN, options)

        assert result.hourly is None
        assert result.daily is None
        params = route.calls.last.request.url.params
        assert "hourly" not in params
        assert "daily" not in params

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_days_and_timezone(
        self, forecaster: ForecastClient, forecast_payload: dict
    ):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        await forecaster.fetch(ILORIN, ForecastOptions(forecast_days=3, timezone="UTC"))

        params = route.calls.last.request.url.params
        assert params["forecast_days"] == "3"
        assert params["timezone"] == "UTC"

    @pytest.mark.asyncio
    @respx.mock
    async def test_provider_rejects_request(self, forecaster: ForecastClient):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(
                400,
                json={"error": True, "reason": "Latitude must be in range of -90 to 90°."},
            )
        )

        with pytest.raises(ProviderError, match="Latitude") as exc_info:
            await forecaster.fetch(ILORIN)
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure(self, forecaster: ForecastClient):
        route = respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(NetworkError):
            await forecaster.fetch(ILORIN)
        # single attempt, no retries
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_current_block(
        self, forecaster: ForecastClient, forecast_payload: dict
    ):
        del forecast_payload["current_weather"]
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))

        with pytest.raises(MalformedResponse):
            await forecaster.fetch(ILORIN)


class TestParseForecast:
    def test_missing_requested_hourly(self, forecast_payload: dict):
        del forecast_payload["hourly"]
        with pytest.raises(MalformedResponse, match="hourly"):
            parse_forecast(forecast_payload, ForecastOptions())

    def test_unrequested_block_ignored(self, forecast_payload: dict):
        del forecast_payload["hourly"]
        result = parse_forecast(forecast_payload, ForecastOptions(include_hourly=False))
        assert result.hourly is None
        assert result.daily is not None

    @pytest.mark.parametrize("field", list(HOURLY_FIELDS))
    def test_missing_hourly_field(self, forecast_payload: dict, field: str):
        del forecast_payload["hourly"][field]
        with pytest.raises(MalformedResponse, match=field):
            parse_forecast(forecast_payload, ForecastOptions())

    @pytest.mark.parametrize("field", list(DAILY_FIELDS))
    def test_missing_daily_field(self, forecast_payload: dict, field: str):
        del forecast_payload["daily"][field]
        with pytest.raises(MalformedResponse, match=field):
            parse_forecast(forecast_payload, ForecastOptions())

    def test_unequal_hourly_lengths(self, forecast_payload: dict):
        forecast_payload["hourly"]["temperature_2m"].pop()
        with pytest.raises(MalformedResponse):
            parse_forecast(forecast_payload, ForecastOptions())

    def test_current_missing_field(self, forecast_payload: dict):
        del forecast_payload["current_weather"]["weathercode"]
        with pytest.raises(MalformedResponse):
            parse_forecast(forecast_payload, ForecastOptions())

    def test_null_values_kept_as_none(self, forecast_payload: dict):
        forecast_payload["hourly"]["precipitation_probability"][0] = None
        forecast_payload["daily"]["sunset"][2] = None
        result = parse_forecast(forecast_payload, ForecastOptions())
        assert result.hourly.precipitation_probability[0] is None
        assert result.daily.sunset[2] is None

    def test_null_timestamp_rejected(self, forecast_payload: dict):
        forecast_payload["hourly"]["time"][3] = None
        with pytest.raises(MalformedResponse):
            parse_forecast(forecast_payload, ForecastOptions())

    def test_non_numeric_utc_offset(self, forecast_payload: dict):
        forecast_payload["utc_offset_seconds"] = "east"
        with pytest.raises(MalformedResponse, match="utc_offset_seconds"):
            parse_forecast(forecast_payload, ForecastOptions())


class TestForecastOptions:
    def test_defaults(self):
        o = ForecastOptions()
        assert o.include_hourly is True
        assert o.include_daily is True
        assert o.forecast_days == 7
        assert o.timezone == "auto"

    @pytest.mark.parametrize("days", [0, 17, -1])
    def test_days_out_of_bounds(self, days: int):
        with pytest.raises(InvalidInput):
            ForecastOptions(forecast_days=days)

    def test_blank_timezone(self):
        with pytest.raises(InvalidInput):
            ForecastOptions(timezone=" ")
