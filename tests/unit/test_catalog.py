"""Unit tests for the destination catalog"""

import pytest
from abroad_budget.domain.catalog import (
    CITY_COST_MULTIPLIERS,
    find_city,
    get_city,
    get_country,
    list_continents,
    select_destination,
)
from abroad_budget.domain.exceptions import CatalogLookupError


def test_list_continents_order():
    assert [c.id for c in list_continents()] == ["europe", "asia", "northamerica", "oceania"]


def test_every_city_offers_universities():
    for continent in list_continents():
        for country in continent.countries:
            assert country.cities
            for city in country.cities:
                assert city.universities, city.id


def test_select_destination_defaults():
    """Default picker state: Europe, France, Paris, first university"""
    selection = select_destination()

    assert selection.continent.id == "europe"
    assert selection.country.id == "france"
    assert selection.city.id == "paris"
    assert selection.university == "EMLYON Business School"


def test_select_destination_continent_change_cascades():
    selection = select_destination("asia")

    assert selection.country.id == "singapore"
    assert selection.city.id == "singapore"
    assert selection.university == "National University of Singapore (NUS)"


def test_select_destination_country_change_cascades():
    selection = select_destination("europe", "uk")

    assert selection.city.name == "London"
    assert selection.university == "City University (Bayes Business School)"


def test_select_destination_city_change_resets_university():
    selection = select_destination("europe", "germany", "munich")
    assert selection.university == "Technical University of Munich"


def test_select_destination_explicit_university():
    selection = select_destination("northamerica", "usa", "boston", "MIT")
    assert selection.university == "MIT"


@pytest.mark.parametrize(
    "args",
    [
        ("antarctica",),
        ("asia", "france"),
        ("europe", "france", "berlin"),
        ("europe", "france", "paris", "MIT"),
    ],
)
def test_select_destination_rejects_unknown(args):
    with pytest.raises(CatalogLookupError):
        select_destination(*args)


def test_get_country_and_city():
    assert get_country("oceania", "australia").name == "Australia"
    assert get_city("asia", "japan", "kyoto").universities == ("Kyoto University", "Ritsumeikan University")


def test_find_city():
    continent, country, city = find_city("vancouver")

    assert continent.id == "northamerica"
    assert country.name == "Canada"
    assert city.name == "Vancouver"
    assert find_city("atlantis") is None


def test_city_multipliers_positive_and_read_only():
    assert all(m > 0 for m in CITY_COST_MULTIPLIERS.values())
    with pytest.raises(TypeError):
        CITY_COST_MULTIPLIERS["paris"] = 5.0
