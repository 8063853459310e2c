"""Application query services."""
from cityinfo.application.services.city_query_service import CityQueryService
from cityinfo.application.services.point_of_interest_query_service import (
    PointOfInterestQueryService,
)

__all__ = [
    "CityQueryService",
    "PointOfInterestQueryService",
]
