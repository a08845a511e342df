"""
Station Service Implementation

Station lookup and search over a network snapshot.
"""

import logging
from typing import List, Optional

from ..models.network import MetroNetwork
from ..models.station import Station, InterchangeStation
from .interchange_detection_service import InterchangeDetectionService


class StationService:
    """Service implementation for station operations on one snapshot."""

    def __init__(self, network: MetroNetwork):
        """
        Initialize the station service.

        Args:
            network: Network snapshot to query
        """
        self.network = network
        self.logger = logging.getLogger(__name__)
        self._stations: Optional[List[Station]] = None

    def get_all_stations(self) -> List[Station]:
        """Get every station once, in first-seen order."""
        if self._stations is None:
            self._stations = self.network.get_all_stations()
        return list(self._stations)

    def get_station(self, station_id: str) -> Optional[Station]:
        return self.network.get_station_by_id(station_id)

    def search_stations(self, query: str) -> List[Station]:
        """Find stations whose name contains the query, ignoring case."""
        if not query or not query.strip():
            return []

        query_lower = query.strip().lower()
        matches = [station for station in self.get_all_stations()
                   if query_lower in station.name.lower()]

        self.logger.debug(f"Station search '{query}' matched {len(matches)} stations")
        return matches

    def get_interchange_stations(self) -> List[InterchangeStation]:
        return InterchangeDetectionService().detect_interchanges(self.network)
