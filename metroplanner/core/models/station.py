"""
Station Model

Pure data model for metro stations identified by id with planar coordinates.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Dict, Any


@dataclass(frozen=True)
class Station:
    """
    Immutable data class representing a metro station on one line.

    The same ``id`` may appear on several lines; each line holds its own
    record and a shared id marks an interchange. Coordinates are planar and
    only used for distance calculations.
    """

    id: str
    name: str
    x: float
    y: float

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.id or not str(self.id).strip():
            raise ValueError("Station id cannot be empty")

    @property
    def coordinates(self) -> Tuple[float, float]:
        """Get the station coordinates as an (x, y) tuple."""
        return (self.x, self.y)

    @property
    def has_valid_coordinates(self) -> bool:
        """Check that both coordinates are finite numbers."""
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            if not math.isfinite(value):
                return False
        return True

    def distance_to(self, other: "Station") -> float:
        """Euclidean distance between this station and another."""
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to the network definition representation."""
        return {"id": self.id, "name": self.name, "x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


@dataclass(frozen=True)
class InterchangeStation:
    """A station id shared by two or more lines."""

    id: str
    name: str
    x: float
    y: float
    lines: Tuple[str, ...]

    @classmethod
    def from_station(cls, station: Station, lines: Tuple[str, ...]) -> "InterchangeStation":
        """Create an interchange record from the first station record seen."""
        return cls(id=station.id, name=station.name, x=station.x, y=station.y, lines=tuple(lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)
