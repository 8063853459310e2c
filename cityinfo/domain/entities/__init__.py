"""Domain entities."""
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest

__all__ = [
    "City",
    "PointOfInterest",
]
