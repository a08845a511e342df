"""
Interchange Detection Service

Derives network-wide interchanges from line topology and lists the
interchanges a particular route uses.
"""

import logging
from typing import Dict, List, Sequence

from ..models.network import MetroNetwork
from ..models.route import RouteSegment
from ..models.station import Station, InterchangeStation


class InterchangeDetectionService:
    """
    Service for interchange detection.

    A station id shared by two or more lines is an interchange. Stations
    that only share a name or coordinates are not.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def detect_interchanges(self, network: MetroNetwork,
                            require_matching_coordinates: bool = False) -> List[InterchangeStation]:
        """
        Detect network-wide interchanges.

        Args:
            network: Network snapshot
            require_matching_coordinates: Only report ids whose records agree
                on coordinates across every line

        Returns:
            Interchanges in first-seen order, each with its line ids in network order
        """
        records = self._group_by_station_id(network)

        interchanges = []
        for station_id, line_records in records.items():
            if len(line_records) < 2:
                continue
            if require_matching_coordinates and not self._coordinates_agree(line_records):
                self.logger.debug(f"Skipping '{station_id}': coordinates differ between lines")
                continue

            first_station = next(iter(line_records.values()))
            interchanges.append(InterchangeStation.from_station(first_station, tuple(line_records)))

        self.logger.debug(f"Detected {len(interchanges)} interchanges")
        return interchanges

    def find_coordinate_mismatches(self, network: MetroNetwork) -> List[str]:
        """
        Get shared station ids whose per-line records disagree on coordinates.

        These ids are still treated as interchanges by default, but most
        likely come from colliding imported data.
        """
        mismatches = []
        for station_id, line_records in self._group_by_station_id(network).items():
            if len(line_records) >= 2 and not self._coordinates_agree(line_records):
                mismatches.append(station_id)
        return mismatches

    def interchanges_of(self, segments: Sequence[RouteSegment]) -> List[Station]:
        """
        List the interchanges used by a composed route, in travel order.

        Args:
            segments: Route segments in travel order

        Returns:
            Station records where one segment ends and the next begins
        """
        interchanges = []

        for i in range(len(segments) - 1):
            current_segment = segments[i]
            next_segment = segments[i + 1]

            # The last station of the current segment is the interchange
            if current_segment.to_station.id == next_segment.from_station.id:
                interchanges.append(current_segment.to_station)
            else:
                self.logger.warning(
                    f"Segments {i} and {i + 1} are not connected: "
                    f"{current_segment.to_station.id} != {next_segment.from_station.id}"
                )

        return interchanges

    def _group_by_station_id(self, network: MetroNetwork) -> Dict[str, Dict[str, Station]]:
        """Map each station id to its first record on every line serving it."""
        records: Dict[str, Dict[str, Station]] = {}
        for line in network.lines:
            for station in line.stations:
                line_records = records.setdefault(station.id, {})
                line_records.setdefault(line.id, station)
        return records

    def _coordinates_agree(self, line_records: Dict[str, Station]) -> bool:
        coordinates = {station.coordinates for station in line_records.values()}
        return len(coordinates) == 1


def detect_interchanges(network: MetroNetwork) -> List[InterchangeStation]:
    """Detect network-wide interchanges by shared station id."""
    return InterchangeDetectionService().detect_interchanges(network)


def interchanges_of(segments: Sequence[RouteSegment]) -> List[Station]:
    """List the interchanges a composed route passes through."""
    return InterchangeDetectionService().interchanges_of(segments)
