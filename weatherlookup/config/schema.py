"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherlookup.ingest.forecast_client import (
    MAX_FORECAST_DAYS,
    OPEN_METEO_FORECAST_URL,
    ForecastOptions,
)
from weatherlookup.ingest.geocoding_client import OPEN_METEO_GEOCODING_URL
from weatherlookup.ingest.transport import DEFAULT_USER_AGENT


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_base_url: str = OPEN_METEO_FORECAST_URL
    geocoding_base_url: str = OPEN_METEO_GEOCODING_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    include_hourly: bool = True
    include_daily: bool = True
    forecast_days: int = Field(default=7, ge=1, le=MAX_FORECAST_DAYS)
    timezone: str = Field(default="auto", min_length=1)

    def to_options(self) -> ForecastOptions:
        return ForecastOptions(
            include_hourly=self.include_hourly,
            include_daily=self.include_daily,
            forecast_days=self.forecast_days,
            timezone=self.timezone,
        )


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    result_count: int = Field(default=5, ge=1, le=100)
    language: str = "en"


class HistoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    max_entries: int = Field(default=5, ge=1, le=50)
    db_path: str = "data/weatherlookup.db"


class LookupConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    forecast: ForecastConfig = ForecastConfig()
    geocoding: GeocodingConfig = GeocodingConfig()
    history: HistoryConfig = HistoryConfig()
