"""Read access to cities."""
from typing import List
from cityinfo.domain.entities.city import City
from cityinfo.domain.exceptions import CityNotFoundError
from cityinfo.domain.repositories.city_repository import CityRepository


class CityQueryService:
    """Thin read-access layer over CityRepository for city-level requests."""

    def __init__(self, city_repository: CityRepository):
        self._city_repo = city_repository

    def get_all_cities(self) -> List[City]:
        """Get all cities in seed order."""
        return self._city_repo.list_cities()

    def get_city_by_id(self, city_id: int) -> City:
        """Get a single city.

        Raises:
            CityNotFoundError: If no city has this id
        """
        city = self._city_repo.get_city(city_id)
        if city is None:
            raise CityNotFoundError(city_id)
        return city
