"""City domain entity - pure business logic."""
from dataclasses import dataclass, field
from typing import Optional, Tuple
from cityinfo.domain.entities.point_of_interest import PointOfInterest


@dataclass(frozen=True)
class City:
    """City domain entity.

    Owns an ordered, immutable sequence of points of interest.
    """
    id: int
    name: str
    description: str = ""
    points_of_interest: Tuple[PointOfInterest, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable (lists from seed data) but store a tuple
        if not isinstance(self.points_of_interest, tuple):
            object.__setattr__(self, "points_of_interest", tuple(self.points_of_interest))

    @property
    def number_of_points_of_interest(self) -> int:
        """Number of points of interest, always derived from the sequence."""
        return len(self.points_of_interest)

    def is_valid(self) -> bool:
        """Validate city business rules."""
        if not (self.name and self.name.strip()):
            return False
        return all(point.is_valid() for point in self.points_of_interest)

    def find_point_of_interest(self, point_id: int) -> Optional[PointOfInterest]:
        """Return the first point of interest with the given id, if any."""
        for point in self.points_of_interest:
            if point.id == point_id:
                return point
        return None
