"""City API routes - thin layer delegating to the query service."""
from typing import List

from fastapi import APIRouter, Depends

from cityinfo.core.dependencies import get_city_query_service
from cityinfo.application.services.city_query_service import CityQueryService
from cityinfo.api.v1.schemas.city_schemas import CitySchema, ProblemDetailsSchema

router = APIRouter(tags=["cities"])


@router.get("/cities", response_model=List[CitySchema])
def get_cities(
    service: CityQueryService = Depends(get_city_query_service),
):
    """List all cities with their points of interest."""
    return [CitySchema.model_validate(city) for city in service.get_all_cities()]


@router.get(
    "/cities/{city_id}",
    response_model=CitySchema,
    responses={404: {"model": ProblemDetailsSchema, "description": "City not found"}},
)
def get_city(
    city_id: int,
    service: CityQueryService = Depends(get_city_query_service),
):
    """
    Get a single city.

    Unknown ids raise CityNotFoundError, which the error handlers turn into 404.
    """
    return CitySchema.model_validate(service.get_city_by_id(city_id))
