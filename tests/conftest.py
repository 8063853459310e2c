"""
Shared fixtures for the City Info API tests.

Every test gets its own repository seeded with the built-in New York /
Paris fixture. The ``client`` fixture points the app's service
providers at that repository.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from cityinfo.main import app
from cityinfo.core.dependencies import (
    get_city_query_service,
    get_point_of_interest_query_service,
)
from cityinfo.application.services.city_query_service import CityQueryService
from cityinfo.application.services.point_of_interest_query_service import (
    PointOfInterestQueryService,
)
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.infrastructure.persistence.repositories.in_memory_city_repository import (
    InMemoryCityRepository,
)
from cityinfo.infrastructure.persistence.seed import default_cities


# ==============================================================================
# REPOSITORY AND SERVICE FIXTURES
# ==============================================================================

@pytest.fixture
def city_repository() -> InMemoryCityRepository:
    """Repository seeded with the built-in fixture."""
    return InMemoryCityRepository(default_cities())


@pytest.fixture
def city_service(city_repository) -> CityQueryService:
    return CityQueryService(city_repository=city_repository)


@pytest.fixture
def point_service(city_repository) -> PointOfInterestQueryService:
    return PointOfInterestQueryService(city_repository=city_repository)


# ==============================================================================
# API CLIENT
# ==============================================================================

@pytest.fixture(scope="function")
def client(city_service, point_service) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by a fresh repository."""
    app.dependency_overrides[get_city_query_service] = lambda: city_service
    app.dependency_overrides[get_point_of_interest_query_service] = lambda: point_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def sample_city_data():
    """Sample city in the wire format for seed file tests."""
    return {
        "id": 10,
        "name": "Tokyo",
        "description": "The capital of Japan.",
        "numberOfPointsOfInterest": 2,
        "pointsOfInterest": [
            {"id": 5, "name": "Shinjuku Gyoen", "description": "A large park in Tokyo."},
            {"id": 6, "name": "Tokyo Tower", "description": "A communications and observation tower."},
        ],
    }


@pytest.fixture
def city_without_points() -> City:
    return City(id=7, name="Reykjavik", description="Capital of Iceland.")


@pytest.fixture
def make_city():
    """Factory for cities with numbered points of interest."""
    def _make(city_id: int, point_ids=(), name: str = "City"):
        return City(
            id=city_id,
            name=f"{name} {city_id}",
            points_of_interest=tuple(
                PointOfInterest(id=pid, name=f"Point {pid}") for pid in point_ids
            ),
        )
    return _make


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
