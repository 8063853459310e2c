"""Dependency injection for FastAPI routes.
Routes depend on services, services depend on the repository abstraction."""
from functools import lru_cache

from cityinfo.config import get_settings
from cityinfo.domain.repositories.city_repository import CityRepository
from cityinfo.infrastructure.persistence.repositories.in_memory_city_repository import (
    InMemoryCityRepository,
)
from cityinfo.infrastructure.persistence.seed import load_seed_cities
from cityinfo.application.services.city_query_service import CityQueryService
from cityinfo.application.services.point_of_interest_query_service import (
    PointOfInterestQueryService,
)


@lru_cache()
def get_city_repository() -> CityRepository:
    """Get the city repository, seeded on first use."""
    return InMemoryCityRepository(load_seed_cities(get_settings()))


@lru_cache()
def get_city_query_service() -> CityQueryService:
    """Get city query service."""
    return CityQueryService(city_repository=get_city_repository())


@lru_cache()
def get_point_of_interest_query_service() -> PointOfInterestQueryService:
    """Get point of interest query service."""
    return PointOfInterestQueryService(city_repository=get_city_repository())
