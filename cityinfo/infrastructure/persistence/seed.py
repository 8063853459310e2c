"""Seed data for the in-memory city repository.

Cities come either from the built-in fixture or from a JSON file named by
the ``CITIES_SEED_FILE`` setting. The file holds an array of cities in the
same shape the API returns::

    [
        {
            "id": 1,
            "name": "New York",
            "description": "The city that never sleeps.",
            "pointsOfInterest": [
                {"id": 1, "name": "Central Park", "description": "..."}
            ]
        }
    ]

``numberOfPointsOfInterest`` is ignored if present; it is always derived.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from cityinfo.config import Settings
from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Seed file is missing, unreadable or malformed."""


class _PointOfInterestRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: int
    name: str = Field(min_length=1)
    description: str = ""


class _CityRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: int
    name: str = Field(min_length=1)
    description: str = ""
    points_of_interest: List[_PointOfInterestRecord] = []

    def to_entity(self) -> City:
        return City(
            id=self.id,
            name=self.name,
            description=self.description,
            points_of_interest=tuple(
                PointOfInterest(id=p.id, name=p.name, description=p.description)
                for p in self.points_of_interest
            ),
        )


def default_cities() -> List[City]:
    """Built-in fixture used when no seed file is configured."""
    return [
        City(
            id=1,
            name="New York",
            description="The city that never sleeps.",
            points_of_interest=(
                PointOfInterest(
                    id=1,
                    name="Central Park",
                    description="A large public park in New York City.",
                ),
                PointOfInterest(
                    id=2,
                    name="Empire State Building",
                    description="A 102-story skyscraper in Midtown Manhattan.",
                ),
            ),
        ),
        City(
            id=2,
            name="Paris",
            description="The city of lights.",
            points_of_interest=(
                PointOfInterest(
                    id=3,
                    name="Eiffel Tower",
                    description="A wrought-iron lattice tower.",
                ),
            ),
        ),
    ]


def load_cities_from_file(path: Union[str, Path]) -> List[City]:
    """Load cities from a JSON seed file.

    Args:
        path: Path to a JSON file containing an array of cities

    Returns:
        Cities in file order

    Raises:
        SeedDataError: If the file cannot be read or does not match the
            expected shape
    """
    seed_path = Path(path)
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {seed_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SeedDataError(f"Seed file {seed_path} is not UTF-8 encoded: {e}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file {seed_path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise SeedDataError(f"Seed file {seed_path} must contain a JSON array of cities")

    try:
        records = [_CityRecord.model_validate(item) for item in raw]
    except ValidationError as e:
        raise SeedDataError(f"Seed file {seed_path} has invalid city data: {e}") from e

    logger.info(f"Loaded {len(records)} cities from {seed_path}")
    return [record.to_entity() for record in records]


def load_seed_cities(settings: Settings) -> List[City]:
    """Return the cities the repository should be seeded with."""
    if settings.CITIES_SEED_FILE:
        return load_cities_from_file(settings.CITIES_SEED_FILE)
    return default_cities()
