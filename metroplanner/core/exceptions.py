"""
Core Exceptions

Exception hierarchy for the routing engine and its collaborators.
"""

from typing import Optional


class MetroPlannerError(Exception):
    """Base class for all metro planner errors."""

    pass


class UnknownStationError(MetroPlannerError):
    """Raised when a station id is not present in the network or has no connections."""

    def __init__(self, station_id: str, reason: Optional[str] = None):
        self.station_id = station_id
        self.reason = reason or "station not found in network"
        super().__init__(f"No such station '{station_id}': {self.reason}")


class InvalidNetworkTopologyError(MetroPlannerError):
    """Raised for a line that cannot contribute edges to the graph."""

    def __init__(self, line_id: str, reason: str):
        self.line_id = line_id
        self.reason = reason
        super().__init__(f"Invalid topology for line '{line_id}': {reason}")


class NetworkDefinitionError(MetroPlannerError):
    """Raised when a network definition is structurally malformed."""

    pass


class NetworkStoreError(MetroPlannerError):
    """Raised when the network store cannot read or write a definition."""

    pass
