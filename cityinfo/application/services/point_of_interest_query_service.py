"""Read access to the points of interest nested under a city."""
from typing import List
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.domain.exceptions import CityNotFoundError, PointOfInterestNotFoundError
from cityinfo.domain.repositories.city_repository import CityRepository


class PointOfInterestQueryService:
    """Query points of interest through their owning city.

    The city is always resolved first. When it is missing the lookup stops
    with CityNotFoundError and the points are never scanned.
    """

    def __init__(self, city_repository: CityRepository):
        self._city_repo = city_repository

    def _resolve_city(self, city_id: int) -> City:
        city = self._city_repo.get_city(city_id)
        if city is None:
            raise CityNotFoundError(city_id)
        return city

    def list_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        """List a city's points of interest in stored order.

        Args:
            city_id: Owning city ID

        Returns:
            Points of interest, possibly empty

        Raises:
            CityNotFoundError: If the city does not exist
        """
        city = self._resolve_city(city_id)
        return list(city.points_of_interest)

    def get_point_of_interest(self, city_id: int, point_id: int) -> PointOfInterest:
        """Get one point of interest of a city.

        Args:
            city_id: Owning city ID
            point_id: Point of interest ID, unique within the city

        Returns:
            The first point of interest with a matching id

        Raises:
            CityNotFoundError: If the city does not exist
            PointOfInterestNotFoundError: If the city has no such point
        """
        city = self._resolve_city(city_id)
        point = city.find_point_of_interest(point_id)
        if point is None:
            raise PointOfInterestNotFoundError(city_id, point_id)
        return point
