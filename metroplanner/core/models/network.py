"""
Metro Network Model

Immutable snapshot of a metro network: an unordered collection of lines.
"""

from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple

from ..exceptions import NetworkDefinitionError
from .metro_line import MetroLine
from .station import Station


@dataclass(frozen=True)
class MetroNetwork:
    """
    Network snapshot handed to the routing engine.

    A snapshot is never mutated; editing the network means building a new
    snapshot and re-planning against it.
    """

    lines: Tuple[MetroLine, ...] = ()

    def __post_init__(self):
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, 'lines', tuple(self.lines))

    @property
    def is_routable(self) -> bool:
        """A network is routable when at least one line has two or more stations."""
        return any(line.station_count >= 2 for line in self.lines)

    @property
    def line_ids(self) -> List[str]:
        return [line.id for line in self.lines]

    def get_line(self, line_id: str) -> Optional[MetroLine]:
        """Get a line by id."""
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    def get_station_by_id(self, station_id: str) -> Optional[Station]:
        """Get the first station record with this id, in line order."""
        for line in self.lines:
            station = line.get_station(station_id)
            if station is not None:
                return station
        return None

    def has_station(self, station_id: str) -> bool:
        return self.get_station_by_id(station_id) is not None

    def get_all_stations(self) -> List[Station]:
        """Get every station once, keeping the first record seen for each id."""
        seen: Dict[str, Station] = {}
        for line in self.lines:
            for station in line.stations:
                if station.id not in seen:
                    seen[station.id] = station
        return list(seen.values())

    def get_line_by_station(self, station_id: str) -> Optional[MetroLine]:
        """Get the first line serving a station."""
        for line in self.lines:
            if line.has_station(station_id):
                return line
        return None

    def get_lines_serving_station(self, station_id: str) -> List[MetroLine]:
        """Get all lines serving a station, in network order."""
        return [line for line in self.lines if line.has_station(station_id)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert network to the persisted definition format."""
        return {"lines": [line.to_dict() for line in self.lines]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetroNetwork':
        """
        Create a network from the persisted definition format.

        Raises:
            NetworkDefinitionError: If the definition is structurally malformed
        """
        if not isinstance(data, dict):
            raise NetworkDefinitionError("Network definition must be an object")

        raw_lines = data.get("lines")
        if not isinstance(raw_lines, list):
            raise NetworkDefinitionError("Invalid network structure: missing or invalid lines array")

        return cls(lines=tuple(MetroLine.from_dict(raw) for raw in raw_lines))

    def __str__(self) -> str:
        return f"MetroNetwork({len(self.lines)} lines, {len(self.get_all_stations())} stations)"
