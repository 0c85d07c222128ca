"""Error taxonomy shared by the clients, the lookup facade and its consumers."""


class WeatherLookupError(Exception):
    """Base class for every error raised by weatherlookup."""


class InvalidInput(WeatherLookupError):
    """Input rejected locally, before any network call."""


class NetworkError(WeatherLookupError):
    """Transport-level failure: timeout, DNS, connection refused."""


class ProviderError(WeatherLookupError):
    """Provider answered with a non-success status or flagged an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(WeatherLookupError):
    """Success status, but the body is missing fields or has the wrong shape."""


class NoResults(WeatherLookupError):
    """Geocoding matched nothing. A normal outcome, not a fault."""

    def __init__(self, query: str):
        super().__init__(f"No results for {query!r}")
        self.query = query


class LocationNotFound(NoResults):
    """Raised by the lookup facade when a city name resolves to nothing."""

    def __init__(self, query: str):
        super().__init__(query)
        self.args = (f"Location not found: {query!r}",)
