"""In-memory implementation of CityRepository.
Can replace any CityRepository."""
import logging
from typing import Iterable, List, Optional
from cityinfo.domain.entities.city import City
from cityinfo.domain.repositories.city_repository import CityRepository

logger = logging.getLogger(__name__)


class InMemoryCityRepository(CityRepository):
    """Holds the authoritative list of cities, seeded once at construction.

    The collection is never mutated after ``__init__``, so lookups are safe
    to run from concurrent requests without locking. Lookups are a linear
    scan over the seed list.
    """

    def __init__(self, cities: Iterable[City] = ()):
        self._cities: List[City] = []
        seen_ids = set()

        for city in cities:
            if not city.is_valid():
                raise ValueError(f"Invalid city {city.id!r}: name is required")
            if city.id in seen_ids:
                raise ValueError(f"Duplicate city id {city.id}")

            point_ids = set()
            for point in city.points_of_interest:
                if point.id in point_ids:
                    raise ValueError(
                        f"Duplicate point of interest id {point.id} in city {city.id}"
                    )
                point_ids.add(point.id)

            seen_ids.add(city.id)
            self._cities.append(city)

        logger.info(
            "Seeded %d cities with %d points of interest",
            len(self._cities),
            sum(city.number_of_points_of_interest for city in self._cities),
        )

    def list_cities(self) -> List[City]:
        """List all cities in seed order."""
        return list(self._cities)

    def get_city(self, city_id: int) -> Optional[City]:
        """Get city by ID."""
        for city in self._cities:
            if city.id == city_id:
                return city
        return None
