"""Destination catalog: continents, countries, cities, universities and cost multipliers"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from abroad_budget.domain.exceptions import CatalogLookupError
from abroad_budget.domain.models import City, Continent, Country, DestinationSelection

CONTINENTS: Tuple[Continent, ...] = (
    Continent(
        "europe",
        "Europe",
        (
            Country(
                "france",
                "France",
                (
                    City(
                        "paris",
                        "Paris",
                        (
                            "EMLYON Business School",
                            "ESSEC",
                            "ESSCA Paris",
                            "Sciences Po Paris",
                            "SKEMA Business School",
                            "Université Paris Dauphine",
                        ),
                    ),
                    City("lyon", "Lyon", ("EMLYON Business School", "ESSCA Lyon")),
                ),
            ),
            Country(
                "uk",
                "United Kingdom",
                (
                    City(
                        "london",
                        "London",
                        (
                            "City University (Bayes Business School)",
                            "Imperial College London",
                            "King's College London",
                            "London School of Economics",
                        ),
                    ),
                    City(
                        "manchester",
                        "Manchester",
                        ("University of Manchester", "Manchester Metropolitan University"),
                    ),
                ),
            ),
            Country(
                "germany",
                "Germany",
                (
                    City(
                        "berlin",
                        "Berlin",
                        (
                            "Humboldt University",
                            "Free University of Berlin",
                            "Technical University of Berlin",
                        ),
                    ),
                    City(
                        "munich",
                        "Munich",
                        ("Technical University of Munich", "Ludwig Maximilian University"),
                    ),
                ),
            ),
        ),
    ),
    Continent(
        "asia",
        "Asia",
        (
            Country(
                "singapore",
                "Singapore",
                (
                    City(
                        "singapore",
                        "Singapore",
                        (
                            "National University of Singapore (NUS)",
                            "Nanyang Technological University (NTU)",
                            "Singapore Management University (SMU)",
                        ),
                    ),
                ),
            ),
            Country(
                "japan",
                "Japan",
                (
                    City(
                        "tokyo",
                        "Tokyo",
                        ("University of Tokyo", "Waseda University", "Keio University"),
                    ),
                    City("kyoto", "Kyoto", ("Kyoto University", "Ritsumeikan University")),
                ),
            ),
        ),
    ),
    Continent(
        "northamerica",
        "North America",
        (
            Country(
                "usa",
                "United States",
                (
                    City(
                        "newyork",
                        "New York",
                        (
                            "Columbia University",
                            "New York University (NYU)",
                            "Fordham University",
                        ),
                    ),
                    City("boston", "Boston", ("Harvard University", "MIT", "Boston University")),
                ),
            ),
            Country(
                "canada",
                "Canada",
                (
                    City(
                        "toronto",
                        "Toronto",
                        ("University of Toronto", "York University", "Ryerson University"),
                    ),
                    City(
                        "vancouver",
                        "Vancouver",
                        ("University of British Columbia", "Simon Fraser University"),
                    ),
                ),
            ),
        ),
    ),
    Continent(
        "oceania",
        "Oceania",
        (
            Country(
                "australia",
                "Australia",
                (
                    City(
                        "sydney",
                        "Sydney",
                        (
                            "University of Sydney (USYD)",
                            "University of New South Wales (UNSW)",
                            "University of Technology Sydney",
                        ),
                    ),
                    City(
                        "melbourne",
                        "Melbourne",
                        ("University of Melbourne", "Monash University", "RMIT University"),
                    ),
                ),
            ),
        ),
    ),
)

# Relative cost of living, applied to the base cost formula only
CITY_COST_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        "paris": 1.2,
        "london": 1.3,
        "barcelona": 0.9,
        "berlin": 0.95,
        "amsterdam": 1.1,
    }
)

DEFAULT_CONTINENT_ID = "europe"


def list_continents() -> Tuple[Continent, ...]:
    return CONTINENTS


def get_continent(continent_id: str) -> Continent:
    for continent in CONTINENTS:
        if continent.id == continent_id:
            return continent
    raise CatalogLookupError(f"Unknown continent: {continent_id}")


def get_country(continent_id: str, country_id: str) -> Country:
    for country in get_continent(continent_id).countries:
        if country.id == country_id:
            return country
    raise CatalogLookupError(f"Unknown country: {continent_id}/{country_id}")


def get_city(continent_id: str, country_id: str, city_id: str) -> City:
    for city in get_country(continent_id, country_id).cities:
        if city.id == city_id:
            return city
    raise CatalogLookupError(f"Unknown city: {continent_id}/{country_id}/{city_id}")


def find_city(city_id: str) -> Optional[Tuple[Continent, Country, City]]:
    """Locate a city anywhere in the catalog by its id"""
    for continent in CONTINENTS:
        for country in continent.countries:
            for city in country.cities:
                if city.id == city_id:
                    return continent, country, city
    return None


def select_destination(
    continent_id: str = DEFAULT_CONTINENT_ID,
    country_id: str | None = None,
    city_id: str | None = None,
    university: str | None = None,
) -> DestinationSelection:
    """
    Resolve a destination path, filling omitted levels with their first entry.

    Changing the continent resets country, city and university to the first
    of each; changing the country resets city and university; changing the
    city resets the university.

    Raises:
        CatalogLookupError: Unknown id, or university not offered in the city
    """
    continent = get_continent(continent_id)
    country = get_country(continent.id, country_id) if country_id else continent.countries[0]
    city = get_city(continent.id, country.id, city_id) if city_id else country.cities[0]

    if university is None:
        university = city.universities[0]
    elif university not in city.universities:
        raise CatalogLookupError(f"{university} is not offered in {city.name}")

    return DestinationSelection(continent=continent, country=country, city=city, university=university)
