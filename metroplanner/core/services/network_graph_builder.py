"""
Network Graph Builder

Builds the undirected weighted adjacency structure from line topology using
Euclidean distance between station coordinates.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Tuple, Iterator

from ..exceptions import InvalidNetworkTopologyError
from ..models.metro_line import MetroLine
from ..models.network import MetroNetwork


@dataclass(frozen=True)
class GraphEdge:
    """One direction of a line connection between two adjacent stations."""

    neighbor_id: str
    line_id: str
    weight: float


class NetworkGraph:
    """
    Read-only adjacency list keyed by station id.

    Stations joined by several lines have one parallel edge per line, each
    carrying its own line id.
    """

    def __init__(self, adjacency: Dict[str, Tuple[GraphEdge, ...]],
                 rejected_lines: Tuple[InvalidNetworkTopologyError, ...] = ()):
        self._adjacency = dict(adjacency)
        self._rejected_lines = tuple(rejected_lines)

    def neighbors(self, station_id: str) -> Tuple[GraphEdge, ...]:
        """Get all edges leaving a station."""
        return self._adjacency.get(station_id, ())

    @property
    def station_ids(self) -> List[str]:
        return list(self._adjacency.keys())

    @property
    def station_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of undirected edges, parallel edges counted separately."""
        return sum(len(edges) for edges in self._adjacency.values()) // 2

    @property
    def rejected_lines(self) -> Tuple[InvalidNetworkTopologyError, ...]:
        """Lines that contributed no edges, with the reason."""
        return self._rejected_lines

    def __contains__(self, station_id: str) -> bool:
        return station_id in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"NetworkGraph(stations={self.station_count}, edges={self.edge_count})"


class NetworkGraphBuilder:
    """Builds a fresh graph from one network snapshot; holds no cached graph."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def build(self, network: MetroNetwork) -> NetworkGraph:
        """Build the network graph from every line's consecutive station pairs."""
        adjacency: Dict[str, List[GraphEdge]] = defaultdict(list)
        rejected: List[InvalidNetworkTopologyError] = []

        for line in network.lines:
            try:
                self._check_line(line)
            except InvalidNetworkTopologyError as e:
                self.logger.warning(f"Line contributes no edges: {e}")
                rejected.append(e)
                continue

            for i in range(len(line.stations) - 1):
                from_station = line.stations[i]
                to_station = line.stations[i + 1]
                distance = from_station.distance_to(to_station)

                adjacency[from_station.id].append(GraphEdge(to_station.id, line.id, distance))
                adjacency[to_station.id].append(GraphEdge(from_station.id, line.id, distance))

        graph = NetworkGraph(
            {station_id: tuple(edges) for station_id, edges in adjacency.items()},
            tuple(rejected),
        )
        self.logger.info(
            f"Built network graph with {graph.station_count} stations and "
            f"{graph.edge_count} connections from {len(network.lines)} lines"
        )
        return graph

    def _check_line(self, line: MetroLine) -> None:
        """
        Check that a line can contribute edges.

        Raises:
            InvalidNetworkTopologyError: If the line has fewer than 2 stations
                or a station with malformed coordinates
        """
        if line.station_count < 2:
            raise InvalidNetworkTopologyError(
                line.id, f"needs at least 2 stations, has {line.station_count}"
            )

        for station in line.stations:
            if not station.has_valid_coordinates:
                raise InvalidNetworkTopologyError(
                    line.id, f"station '{station.id}' has malformed coordinates"
                )


def build_graph(network: MetroNetwork) -> NetworkGraph:
    """Build the graph for a network snapshot."""
    return NetworkGraphBuilder().build(network)
