"""GET /v1/universities/image - Campus photo lookup"""

from fastapi import APIRouter, Depends, HTTPException

from abroad_budget.api.v1.schemas import ImageResponse
from abroad_budget.api.dependencies import get_image_client
from abroad_budget.domain.catalog import find_city
from abroad_budget.infrastructure.clients.image_search import UniversityImageClient

router = APIRouter()


@router.get("/universities/image", response_model=ImageResponse)
async def get_university_image(
    university: str,
    city_id: str,
    image_client: UniversityImageClient = Depends(get_image_client),
):
    """Find a campus image; answers with a placeholder URL and an error message when none is found"""
    located = find_city(city_id)
    if located is None:
        raise HTTPException(status_code=404, detail="City not found")
    _, country, city = located

    result = await image_client.find_image(university, city.name, country.name)
    return ImageResponse(url=result.url, error=result.error)
