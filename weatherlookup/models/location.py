"""Location value types: coordinates and geocoding candidates."""

import math
from dataclasses import dataclass

from weatherlookup.errors import InvalidInput


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_range("latitude", self.latitude, 90.0)
        _check_range("longitude", self.longitude, 180.0)


@dataclass(frozen=True)
class LocationCandidate:
    name: str
    country: str
    latitude: float
    longitude: float
    admin1: str | None = None
    timezone: str | None = None
    population: int | None = None
    provider_id: int | None = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(self.latitude, self.longitude)

    @property
    def label(self) -> str:
        """Display label, e.g. "Ilorin, Kwara, Nigeria"."""
        parts = [self.name, self.admin1, self.country]
        return ", ".join(p for p in parts if p)


def _check_range(field: str, value: float, bound: float) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{field} must be a number, got {value!r}")
    if math.isnan(value) or not -bound <= value <= bound:
        raise InvalidInput(f"{field} {value} outside [-{bound:g}, {bound:g}]")
