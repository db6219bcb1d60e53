"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional

from abroad_budget.domain.models import City, Continent, Country, DestinationSelection, PredictionRequest


class EstimateRequest(BaseModel):
    """Request body for POST /v1/estimate"""

    city_id: str = Field(..., min_length=1, description="Catalog city identifier, e.g. 'paris'")
    university_id: str = Field(..., min_length=1, description="University name")
    duration_months: int = Field(6, ge=1, le=24)
    accommodation_level: int = Field(3, ge=1, le=5)
    dining_level: int = Field(3, ge=1, le=5)
    nightlife_level: int = Field(3, ge=1, le=5)
    activities_level: int = Field(3, ge=1, le=5)
    shopping_level: int = Field(3, ge=1, le=5)
    local_trips: int = Field(2, ge=0, le=50, description="Trips within the host country")
    international_trips: int = Field(1, ge=0, le=20)

    def to_domain(self) -> PredictionRequest:
        return PredictionRequest(**self.model_dump())


class EstimateResponse(BaseModel):
    """Response for POST /v1/estimate"""

    city_id: str
    university_id: str
    total_cost: int
    formatted_cost: str
    currency: str = "EUR"
    basis: str  # historical | base | remote


class CitySchema(BaseModel):
    id: str
    name: str
    universities: List[str]

    @classmethod
    def from_domain(cls, city: City) -> "CitySchema":
        return cls(id=city.id, name=city.name, universities=list(city.universities))


class CountrySchema(BaseModel):
    id: str
    name: str
    cities: List[CitySchema]

    @classmethod
    def from_domain(cls, country: Country) -> "CountrySchema":
        return cls(
            id=country.id,
            name=country.name,
            cities=[CitySchema.from_domain(c) for c in country.cities],
        )


class ContinentSchema(BaseModel):
    id: str
    name: str
    countries: List[CountrySchema]

    @classmethod
    def from_domain(cls, continent: Continent) -> "ContinentSchema":
        return cls(
            id=continent.id,
            name=continent.name,
            countries=[CountrySchema.from_domain(c) for c in continent.countries],
        )


class CatalogResponse(BaseModel):
    """Response for GET /v1/catalog"""

    continents: List[ContinentSchema]


class SelectionResponse(BaseModel):
    """Response for GET /v1/catalog/selection"""

    continent_id: str
    country_id: str
    city_id: str
    city_name: str
    country_name: str
    university: str
    universities: List[str]

    @classmethod
    def from_domain(cls, selection: DestinationSelection) -> "SelectionResponse":
        return cls(
            continent_id=selection.continent.id,
            country_id=selection.country.id,
            city_id=selection.city.id,
            city_name=selection.city.name,
            country_name=selection.country.name,
            university=selection.university,
            universities=list(selection.city.universities),
        )


class ImageResponse(BaseModel):
    """Response for GET /v1/universities/image"""

    url: str
    error: Optional[str] = None
