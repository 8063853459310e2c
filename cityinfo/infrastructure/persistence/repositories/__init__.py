"""Repository implementations."""
from cityinfo.infrastructure.persistence.repositories.in_memory_city_repository import (
    InMemoryCityRepository,
)

__all__ = [
    "InMemoryCityRepository",
]
