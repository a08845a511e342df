"""
Route Converter

Folds a flat station-by-station path into line segments.
"""

import logging
from typing import List, Optional

from ..models.network import MetroNetwork
from ..models.route import PathStep, RouteSegment
from ..models.station import Station


class RouteConverter:
    """Splits a path into one segment per line used, sharing boundary stations."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def compose(self, network: MetroNetwork, path: List[PathStep]) -> List[RouteSegment]:
        """
        Convert a path into route segments.

        A segment closes at each line change and at the end of the path. The
        station where the line changes ends the closing segment and starts the
        next one. Runs of fewer than two stations are dropped.

        Args:
            network: Network snapshot the path was computed on
            path: Ordered path steps from source to destination

        Returns:
            List of RouteSegment objects in travel order
        """
        if not path:
            return []

        segments: List[RouteSegment] = []
        current_line = path[0].line_id
        run = [path[0].station_id]

        for step in path[1:]:
            if step.line_id != current_line:
                self._close_segment(network, current_line, run, segments)
                # Restart from the boundary station
                run = [run[-1]]
                current_line = step.line_id
            run.append(step.station_id)

        self._close_segment(network, current_line, run, segments)
        return segments

    def _close_segment(self, network: MetroNetwork, line_id: Optional[str],
                       station_ids: List[str], segments: List[RouteSegment]) -> None:
        """Emit a segment for a run of station ids on one line."""
        if len(station_ids) < 2 or line_id is None:
            return

        line = network.get_line(line_id)
        if line is None:
            self.logger.warning(f"Line '{line_id}' not found in network, dropping segment")
            return

        stations = [self._resolve_station(network, line_id, station_id) for station_id in station_ids]
        if any(station is None for station in stations):
            self.logger.warning(f"Segment on line '{line_id}' references unknown stations, dropping it")
            return

        segments.append(RouteSegment(
            line_id=line.id,
            line_name=line.name,
            line_color=line.color,
            stations=tuple(stations),
        ))

    def _resolve_station(self, network: MetroNetwork, line_id: str, station_id: str) -> Optional[Station]:
        """Prefer the segment line's own record for a shared station id."""
        line = network.get_line(line_id)
        station = line.get_station(station_id) if line is not None else None
        if station is None:
            station = network.get_station_by_id(station_id)
        return station


def compose(network: MetroNetwork, path: List[PathStep]) -> List[RouteSegment]:
    """Compose route segments from a path."""
    return RouteConverter().compose(network, path)
