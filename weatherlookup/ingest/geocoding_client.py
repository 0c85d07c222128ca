"""Open-Meteo geocoding client: place name to candidate locations."""

import logging

import httpx

from weatherlookup.errors import InvalidInput, MalformedResponse, NoResults
from weatherlookup.ingest.transport import DEFAULT_USER_AGENT, get_json
from weatherlookup.models.location import Coordinates, LocationCandidate

logger = logging.getLogger(__name__)

OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1"
DEFAULT_RESULT_COUNT = 5


class GeocodingClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_GEOCODING_URL,
        count: int = DEFAULT_RESULT_COUNT,
        language: str = "en",
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ):
        if count < 1:
            raise InvalidInput(f"count must be positive, got {count}")
        self.base_url = base_url.rstrip("/")
        self.count = count
        self.language = language
        self.timeout = timeout
        self.user_agent = user_agent
        self.client = client

    async def search(self, query: str) -> list[LocationCandidate]:
        """Resolve a place name to candidates, in provider order.

        Raises InvalidInput for a blank query (no request is made) and
        NoResults when the provider matches nothing.
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidInput("Search query must be a non-empty string")
        name = query.strip()

        data = await get_json(
            f"{self.base_url}/search",
            {"name": name, "count": self.count, "language": self.language, "format": "json"},
            timeout=self.timeout,
            user_agent=self.user_agent,
            client=self.client,
        )

        results = data.get("results")
        if results is None:
            results = []
        if not isinstance(results, list):
            raise MalformedResponse("Geocoding 'results' is not a list")
        if not results:
            logger.info("Geocoding found nothing for %r", name)
            raise NoResults(name)

        return [_parse_candidate(r) for r in results[: self.count]]


def _parse_candidate(raw: object) -> LocationCandidate:
    if not isinstance(raw, dict):
        raise MalformedResponse(f"Geocoding result is not an object: {raw!r}")
    try:
        coords = Coordinates(float(raw["latitude"]), float(raw["longitude"]))
        return LocationCandidate(
            name=str(raw["name"]),
            country=str(raw.get("country") or ""),
            latitude=coords.latitude,
            longitude=coords.longitude,
            admin1=raw.get("admin1"),
            timezone=raw.get("timezone"),
            population=raw.get("population"),
            provider_id=raw.get("id"),
        )
    except InvalidInput as e:
        raise MalformedResponse(f"Geocoding result has invalid coordinates: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Geocoding result missing fields: {e}") from e
