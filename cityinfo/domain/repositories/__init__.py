"""Repository interfaces."""
from cityinfo.domain.repositories.city_repository import CityRepository

__all__ = [
    "CityRepository",
]
