"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from weatherlookup.config.schema import HistoryConfig, LookupConfig, ProviderConfig
from weatherlookup.ingest.forecast_client import ForecastClient
from weatherlookup.ingest.geocoding_client import GeocodingClient
from weatherlookup.pipeline.lookup import WeatherLookupFacade

FORECAST_URL = "https://test-forecast.example.com/v1"
GEOCODING_URL = "https://test-geo.example.com/v1"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def forecast_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "forecast_ilorin.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "geocoding_ilorin.json") as f:
        return json.load(f)


@pytest.fixture
def empty_geocoding_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "geocoding_empty.json") as f:
        return json.load(f)


@pytest.fixture
def geocoder() -> GeocodingClient:
    return GeocodingClient(base_url=GEOCODING_URL, timeout=1.0)


@pytest.fixture
def forecaster() -> ForecastClient:
    return ForecastClient(base_url=FORECAST_URL, timeout=1.0)


@pytest.fixture
def facade(geocoder: GeocodingClient, forecaster: ForecastClient) -> WeatherLookupFacade:
    return WeatherLookupFacade(geocoder, forecaster)


@pytest.fixture
def test_config(tmp_path: Path) -> LookupConfig:
    """Config pointing at the mocked endpoints and a temporary database."""
    return LookupConfig(
        provider=ProviderConfig(
            forecast_base_url=FORECAST_URL,
            geocoding_base_url=GEOCODING_URL,
            timeout_seconds=1.0,
        ),
        history=HistoryConfig(db_path=str(tmp_path / "test.db")),
    )
