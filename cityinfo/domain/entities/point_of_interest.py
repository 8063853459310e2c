"""PointOfInterest domain entity - pure business logic."""
from dataclasses import dataclass


@dataclass(frozen=True)
class PointOfInterest:
    """A named place that belongs to exactly one city.

    The id is unique within the owning city only.
    """
    id: int
    name: str
    description: str = ""

    def is_valid(self) -> bool:
        """Validate point of interest business rules."""
        return bool(self.name and self.name.strip())
