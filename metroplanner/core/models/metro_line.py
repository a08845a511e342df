"""
Metro Line Model

Data model for metro lines as an ordered sequence of stations.
"""

from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple

from ..exceptions import NetworkDefinitionError
from .station import Station


@dataclass(frozen=True)
class MetroLine:
    """
    Represents a metro line with its ordered stations.

    Adjacency is implicit in the order: the station at index i connects only
    to i-1 and i+1. Lines with fewer than two stations are accepted here and
    simply contribute no edges when the graph is built.
    """

    id: str
    name: str
    color: str
    stations: Tuple[Station, ...]

    def __post_init__(self):
        """Validate metro line data."""
        if not self.id:
            raise ValueError("Line id cannot be empty")

        # Accept any sequence but store a tuple so the line stays hashable
        if not isinstance(self.stations, tuple):
            object.__setattr__(self, 'stations', tuple(self.stations))

    @property
    def station_count(self) -> int:
        """Get the number of stations on this line."""
        return len(self.stations)

    @property
    def station_ids(self) -> List[str]:
        """Get station ids in line order."""
        return [station.id for station in self.stations]

    @property
    def terminus_stations(self) -> List[Station]:
        """Get the terminus stations (first and last)."""
        if len(self.stations) >= 2:
            return [self.stations[0], self.stations[-1]]
        return list(self.stations)

    def has_station(self, station_id: str) -> bool:
        """Check if this line serves the given station id."""
        return any(station.id == station_id for station in self.stations)

    def get_station(self, station_id: str) -> Optional[Station]:
        """Get this line's record for a station id."""
        for station in self.stations:
            if station.id == station_id:
                return station
        return None

    def get_adjacent_stations(self, station_id: str) -> List[Station]:
        """Get stations adjacent to the given station on this line."""
        adjacent = []
        for index, station in enumerate(self.stations):
            if station.id != station_id:
                continue
            if index > 0:
                adjacent.append(self.stations[index - 1])
            if index < len(self.stations) - 1:
                adjacent.append(self.stations[index + 1])
        return adjacent

    def to_dict(self) -> Dict[str, Any]:
        """Convert metro line to the network definition representation."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "stations": [station.to_dict() for station in self.stations],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetroLine':
        """
        Create MetroLine from the network definition representation.

        Raises:
            NetworkDefinitionError: If required fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise NetworkDefinitionError(f"Line entry must be an object, got {type(data).__name__}")

        for key in ("id", "name", "color", "stations"):
            if key not in data:
                raise NetworkDefinitionError(f"Line {data.get('id', '?')}: missing '{key}'")

        if not isinstance(data["id"], str):
            raise NetworkDefinitionError(f"Line {data['id']!r}: 'id' must be a string")

        raw_stations = data["stations"]
        if not isinstance(raw_stations, list):
            raise NetworkDefinitionError(f"Line {data['id']}: 'stations' must be a list")

        stations = []
        for index, raw in enumerate(raw_stations):
            if not isinstance(raw, dict):
                raise NetworkDefinitionError(f"Line {data['id']}, station {index + 1}: must be an object")
            for key in ("id", "name", "x", "y"):
                if key not in raw:
                    raise NetworkDefinitionError(
                        f"Line {data['id']}, station {index + 1}: missing '{key}'"
                    )
            if not isinstance(raw["id"], str):
                raise NetworkDefinitionError(
                    f"Line {data['id']}, station {index + 1}: 'id' must be a string"
                )
            for key in ("x", "y"):
                value = raw[key]
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise NetworkDefinitionError(
                        f"Line {data['id']}, station {raw['id']}: '{key}' must be a number"
                    )
            try:
                stations.append(Station(id=raw["id"], name=str(raw["name"]),
                                        x=raw["x"], y=raw["y"]))
            except ValueError as e:
                raise NetworkDefinitionError(f"Line {data['id']}, station {index + 1}: {e}") from e

        try:
            return cls(id=data["id"], name=str(data["name"]),
                       color=str(data["color"]), stations=tuple(stations))
        except ValueError as e:
            raise NetworkDefinitionError(str(e)) from e

    def __str__(self) -> str:
        """String representation of the metro line."""
        return f"{self.name} ({self.station_count} stations)"

    def __contains__(self, station_id: str) -> bool:
        """Support 'in' operator for checking if a station id is on the line."""
        return self.has_station(station_id)

    def __len__(self) -> int:
        return self.station_count
