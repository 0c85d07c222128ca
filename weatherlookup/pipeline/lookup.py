"""Lookup facade: city name or coordinates to a ForecastResult."""

import logging

import httpx

from weatherlookup.config.schema import LookupConfig
from weatherlookup.errors import LocationNotFound, NoResults
from weatherlookup.ingest.forecast_client import ForecastClient, ForecastOptions
from weatherlookup.ingest.geocoding_client import GeocodingClient
from weatherlookup.models.forecast import ForecastResult
from weatherlookup.models.location import Coordinates

logger = logging.getLogger(__name__)


class WeatherLookupFacade:
    """Composes geocoding and forecast retrieval.

    Holds no mutable state: every call performs fresh network I/O and
    returns a new result. Errors from either client propagate unchanged,
    except that a geocoding NoResults becomes LocationNotFound.
    """

    def __init__(
        self,
        geocoder: GeocodingClient,
        forecaster: ForecastClient,
        default_options: ForecastOptions | None = None,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.default_options = default_options or ForecastOptions()

    @classmethod
    def from_config(
        cls, config: LookupConfig, client: httpx.AsyncClient | None = None
    ) -> "WeatherLookupFacade":
        provider = config.provider
        geocoder = GeocodingClient(
            base_url=provider.geocoding_base_url,
            count=config.geocoding.result_count,
            language=config.geocoding.language,
            timeout=provider.timeout_seconds,
            user_agent=provider.user_agent,
            client=client,
        )
        forecaster = ForecastClient(
            base_url=provider.forecast_base_url,
            timeout=provider.timeout_seconds,
            user_agent=provider.user_agent,
            client=client,
        )
        return cls(geocoder, forecaster, config.forecast.to_options())

    async def by_city(
        self, name: str, options: ForecastOptions | None = None
    ) -> ForecastResult:
        try:
            candidates = await self.geocoder.search(name)
        except NoResults as e:
            logger.info("No location matches %r", e.query)
            raise LocationNotFound(e.query) from e

        best = candidates[0]
        logger.info(
            "Resolved %r to %s (%.4f, %.4f)",
            name, best.label, best.latitude, best.longitude,
        )
        result = await self.forecaster.fetch(
            best.coordinates, options or self.default_options
        )
        return result.with_location(best)

    async def by_coords(
        self, latitude: float, longitude: float, options: ForecastOptions | None = None
    ) -> ForecastResult:
        coords = Coordinates(latitude, longitude)
        return await self.forecaster.fetch(coords, options or self.default_options)
