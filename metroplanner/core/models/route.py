"""
Route Model

Data models for computed paths, line segments and complete routes.
"""

from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple

from .station import Station


@dataclass(frozen=True)
class PathStep:
    """One station on a raw path and the line used to arrive there."""

    station_id: str
    line_id: Optional[str] = None


@dataclass(frozen=True)
class RouteSegment:
    """
    A maximal run of a route on a single line.

    Adjacent segments share their boundary station: the ``to_station`` of one
    segment is the ``from_station`` of the next.
    """

    line_id: str
    line_name: str
    line_color: str
    stations: Tuple[Station, ...]

    def __post_init__(self):
        """Validate route segment data."""
        if not self.line_id:
            raise ValueError("Line id cannot be empty")
        if not isinstance(self.stations, tuple):
            object.__setattr__(self, 'stations', tuple(self.stations))
        if len(self.stations) < 2:
            raise ValueError("Route segment must have at least 2 stations")

    @property
    def from_station(self) -> Station:
        return self.stations[0]

    @property
    def to_station(self) -> Station:
        return self.stations[-1]

    @property
    def station_count(self) -> int:
        return len(self.stations)

    @property
    def stops(self) -> int:
        """Number of stops travelled on this segment."""
        return len(self.stations) - 1

    @property
    def distance(self) -> float:
        """Sum of the distances between consecutive stations on the segment."""
        return sum(
            self.stations[i].distance_to(self.stations[i + 1])
            for i in range(len(self.stations) - 1)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line_id": self.line_id,
            "line_name": self.line_name,
            "line_color": self.line_color,
            "stations": [station.to_dict() for station in self.stations],
            "from": self.from_station.to_dict(),
            "to": self.to_station.to_dict(),
            "distance": self.distance,
        }


@dataclass(frozen=True)
class ComputedRoute:
    """
    Represents a complete route between two stations.

    ``total_stations`` counts path entries, so an interchange station is
    counted once per occurrence in the path.
    """

    source_id: str
    destination_id: str
    segments: Tuple[RouteSegment, ...]
    total_stations: int
    total_distance: float
    interchanges: Tuple[Station, ...] = ()
    duration: int = 0

    def __post_init__(self):
        """Validate and normalise route data."""
        if not self.source_id or not self.destination_id:
            raise ValueError("Source and destination cannot be empty")
        if self.total_stations < 1:
            raise ValueError("Route must visit at least one station")

        if not isinstance(self.segments, tuple):
            object.__setattr__(self, 'segments', tuple(self.segments))
        if not isinstance(self.interchanges, tuple):
            object.__setattr__(self, 'interchanges', tuple(self.interchanges))

    @property
    def found(self) -> bool:
        return True

    @property
    def interchange_count(self) -> int:
        return len(self.interchanges)

    @property
    def is_direct(self) -> bool:
        """Check if this is a direct route (no changes)."""
        return len(self.segments) <= 1

    @property
    def lines_used(self) -> List[str]:
        """Get line ids in the order they are travelled."""
        lines = []
        for segment in self.segments:
            if segment.line_id not in lines:
                lines.append(segment.line_id)
        return lines

    def get_duration_display(self) -> str:
        """Get formatted journey duration for display."""
        hours = self.duration // 60
        minutes = self.duration % 60

        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"

    def get_detailed_description(self) -> List[str]:
        """Get step-by-step route description."""
        steps = []

        for i, segment in enumerate(self.segments):
            if i == 0:
                steps.append(f"Board {segment.line_name} at {segment.from_station.name}")
            else:
                steps.append(f"Change to {segment.line_name} at {segment.from_station.name}")

            steps.append(f"Travel to {segment.to_station.name} ({segment.stops} stops)")

        return steps

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        return {
            "source_id": self.source_id,
            "destination_id": self.destination_id,
            "segments": [segment.to_dict() for segment in self.segments],
            "total_stations": self.total_stations,
            "total_distance": self.total_distance,
            "interchanges": [station.to_dict() for station in self.interchanges],
            "duration": self.duration,
            "duration_display": self.get_duration_display(),
            "lines_used": self.lines_used,
        }

    def __str__(self) -> str:
        return (f"{self.source_id} -> {self.destination_id} "
                f"({len(self.segments)} segments, {self.interchange_count} interchanges)")


@dataclass(frozen=True)
class RouteNotFound:
    """Returned when both stations exist but no path connects them."""

    source_id: str
    destination_id: str
    reason: str = "No route between stations"

    @property
    def found(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"No route from {self.source_id} to {self.destination_id}"
