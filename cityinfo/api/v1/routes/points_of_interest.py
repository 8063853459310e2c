"""Point of interest API routes, nested under their city."""
from typing import List

from fastapi import APIRouter, Depends

from cityinfo.core.dependencies import get_point_of_interest_query_service
from cityinfo.application.services.point_of_interest_query_service import (
    PointOfInterestQueryService,
)
from cityinfo.api.v1.schemas.city_schemas import PointOfInterestSchema, ProblemDetailsSchema

router = APIRouter(prefix="/cities/{city_id}/pointsofinterest", tags=["points of interest"])


@router.get(
    "",
    response_model=List[PointOfInterestSchema],
    responses={404: {"model": ProblemDetailsSchema, "description": "City not found"}},
)
def get_points_of_interest(
    city_id: int,
    service: PointOfInterestQueryService = Depends(get_point_of_interest_query_service),
):
    """List the points of interest of a city."""
    return [
        PointOfInterestSchema.model_validate(point)
        for point in service.list_points_of_interest(city_id)
    ]


@router.get(
    "/{point_of_interest_id}",
    response_model=PointOfInterestSchema,
    responses={
        404: {
            "model": ProblemDetailsSchema,
            "description": "City or point of interest not found",
        }
    },
)
def get_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    service: PointOfInterestQueryService = Depends(get_point_of_interest_query_service),
):
    """Get one point of interest of a city."""
    point = service.get_point_of_interest(city_id, point_of_interest_id)
    return PointOfInterestSchema.model_validate(point)
