"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class HistoricalReport:
    """Cost reported for a past stay; static seed data"""

    city_id: str
    university_id: str
    duration_months: int
    accommodation_level: int  # 1 (budget) .. 5 (luxury)
    dining_level: int
    nightlife_level: int
    activities_level: int
    shopping_level: int
    local_trips: int
    international_trips: int
    total_cost: int


@dataclass(frozen=True)
class PredictionRequest:
    """Destination, lifestyle levels and trips to price"""

    city_id: str
    university_id: str
    duration_months: int
    accommodation_level: int
    dining_level: int
    nightlife_level: int
    activities_level: int
    shopping_level: int
    local_trips: int
    international_trips: int


@dataclass(frozen=True)
class CostEstimate:
    """Output of cost prediction"""

    total_cost: int
    basis: str  # "historical" or "base"
    report_count: int


@dataclass(frozen=True)
class City:
    id: str
    name: str
    universities: Tuple[str, ...]


@dataclass(frozen=True)
class Country:
    id: str
    name: str
    cities: Tuple[City, ...]


@dataclass(frozen=True)
class Continent:
    id: str
    name: str
    countries: Tuple[Country, ...]


@dataclass(frozen=True)
class DestinationSelection:
    """Fully resolved continent -> country -> city -> university path"""

    continent: Continent
    country: Country
    city: City
    university: str


@dataclass(frozen=True)
class ImageResult:
    """University image lookup outcome; error is set when url is the placeholder"""

    url: str
    error: str | None = None
