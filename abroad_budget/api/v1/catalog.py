"""GET /v1/catalog - Destination catalog browsing"""

from typing import Optional
from fastapi import APIRouter, HTTPException

from abroad_budget.api.v1.schemas import CatalogResponse, ContinentSchema, SelectionResponse
from abroad_budget.domain.catalog import DEFAULT_CONTINENT_ID, list_continents, select_destination
from abroad_budget.domain.exceptions import CatalogLookupError

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
def get_catalog():
    """Return the full continent -> country -> city -> university tree"""
    return CatalogResponse(continents=[ContinentSchema.from_domain(c) for c in list_continents()])


@router.get("/catalog/selection", response_model=SelectionResponse)
def get_selection(
    continent: str = DEFAULT_CONTINENT_ID,
    country: Optional[str] = None,
    city: Optional[str] = None,
    university: Optional[str] = None,
):
    """
    Resolve a destination, defaulting omitted levels to their first entry.

    Returns:
        Selected path plus the universities offered in the selected city
    """
    try:
        selection = select_destination(continent, country, city, university)
    except CatalogLookupError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SelectionResponse.from_domain(selection)
