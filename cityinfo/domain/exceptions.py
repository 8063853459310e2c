"""Domain exceptions."""
from typing import Optional


class NotFoundError(Exception):
    """A requested resource identifier has no corresponding entry.

    ``resource`` tags which kind of resource was missing so the HTTP layer
    can format the response without inspecting the message.
    """

    resource = "resource"

    def __init__(self, resource_id: int, message: Optional[str] = None):
        self.resource_id = resource_id
        super().__init__(message or f"{self.resource} with id {resource_id} was not found")


class CityNotFoundError(NotFoundError):
    """No city exists with the requested id."""

    resource = "city"

    def __init__(self, city_id: int):
        super().__init__(city_id, f"City with id {city_id} was not found")


class PointOfInterestNotFoundError(NotFoundError):
    """The city exists but has no point of interest with the requested id."""

    resource = "pointOfInterest"

    def __init__(self, city_id: int, point_id: int):
        self.city_id = city_id
        super().__init__(
            point_id,
            f"Point of interest with id {point_id} was not found in city {city_id}",
        )
