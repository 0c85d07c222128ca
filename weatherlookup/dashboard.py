"""Weather lookup HTTP API: FastAPI JSON endpoints over the lookup facade."""

import os
import sqlite3
from datetime import UTC, datetime

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weatherlookup.config.loader import load_config
from weatherlookup.config.schema import LookupConfig
from weatherlookup.errors import (
    InvalidInput,
    MalformedResponse,
    NetworkError,
    NoResults,
    ProviderError,
)
from weatherlookup.ingest.forecast_client import ForecastOptions
from weatherlookup.models.weather_codes import describe
from weatherlookup.pipeline.lookup import WeatherLookupFacade
from weatherlookup.reporting.formatters import candidate_to_dict, forecast_to_dict
from weatherlookup.storage import recent_repo
from weatherlookup.storage.database import open_database

CONFIG_PATH = os.environ.get("WEATHERLOOKUP_CONFIG", "weatherlookup.yaml")


def create_app(config: LookupConfig | None = None) -> FastAPI:
    config = config or load_config(CONFIG_PATH)
    facade = WeatherLookupFacade.from_config(config)

    app = FastAPI(title="Weather Lookup", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _conn() -> sqlite3.Connection:
        return open_database(config.history.db_path)

    def _options(hourly: bool, daily: bool, days: int | None) -> ForecastOptions:
        defaults = config.forecast
        return ForecastOptions(
            include_hourly=hourly,
            include_daily=daily,
            forecast_days=days if days is not None else defaults.forecast_days,
            timezone=defaults.timezone,
        )

    # ── Error mapping ───────────────────────────────────────────────

    @app.exception_handler(InvalidInput)
    async def _invalid_input(request: Request, exc: InvalidInput):
        return JSONResponse(status_code=422, content={"error": "invalid_input", "detail": str(exc)})

    @app.exception_handler(NoResults)
    async def _not_found(request: Request, exc: NoResults):
        return JSONResponse(status_code=404, content={"error": "not_found", "detail": str(exc)})

    @app.exception_handler(NetworkError)
    async def _network(request: Request, exc: NetworkError):
        return JSONResponse(status_code=504, content={"error": "network", "detail": str(exc)})

    @app.exception_handler(ProviderError)
    async def _provider(request: Request, exc: ProviderError):
        return JSONResponse(status_code=502, content={"error": "provider", "detail": str(exc)})

    @app.exception_handler(MalformedResponse)
    async def _malformed(request: Request, exc: MalformedResponse):
        return JSONResponse(status_code=502, content={"error": "malformed_response", "detail": str(exc)})

    # ── Weather endpoints ───────────────────────────────────────────

    @app.get("/api/weather")
    async def weather_by_city(
        city: str,
        hourly: bool = config.forecast.include_hourly,
        daily: bool = config.forecast.include_daily,
        days: int | None = None,
    ):
        """Forecast for a city name; the resolved location is attached."""
        result = await facade.by_city(city, _options(hourly, daily, days))
        if config.history.enabled:
            conn = _conn()
            try:
                recent_repo.record_search(conn, city, config.history.max_entries)
            finally:
                conn.close()
        return forecast_to_dict(result)

    @app.get("/api/weather/coords")
    async def weather_by_coords(
        lat: float,
        lon: float,
        hourly: bool = config.forecast.include_hourly,
        daily: bool = config.forecast.include_daily,
        days: int | None = None,
    ):
        result = await facade.by_coords(lat, lon, _options(hourly, daily, days))
        return forecast_to_dict(result)

    @app.get("/api/geocode")
    async def geocode(q: str = Query(..., description="Place name")):
        candidates = await facade.geocoder.search(q)
        return [candidate_to_dict(c) for c in candidates]

    @app.get("/api/weather-codes/{code}")
    def weather_code(code: int):
        d = describe(code)
        return {"code": code, "description": d.description, "icon": d.icon}

    # ── Recent searches ─────────────────────────────────────────────

    @app.get("/api/recent")
    def get_recent():
        conn = _conn()
        try:
            return recent_repo.list_recent(conn, config.history.max_entries)
        finally:
            conn.close()

    @app.delete("/api/recent")
    def delete_recent():
        conn = _conn()
        try:
            return {"cleared": recent_repo.clear_recent(conn)}
        finally:
            conn.close()

    @app.get("/api/health")
    def get_health():
        """Quick health check."""
        return {
            "ok": True,
            "forecast_base_url": config.provider.forecast_base_url,
            "geocoding_base_url": config.provider.geocoding_base_url,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app
