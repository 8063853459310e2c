"""City repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List
from cityinfo.domain.entities.city import City


class CityRepository(ABC):
    """Read-only repository interface for City entities.

    Points of interest are only reachable through their owning city.
    """

    @abstractmethod
    def list_cities(self) -> List[City]:
        """List all cities in insertion order."""
        pass

    @abstractmethod
    def get_city(self, city_id: int) -> Optional[City]:
        """Get city by ID, or None when no city matches."""
        pass
