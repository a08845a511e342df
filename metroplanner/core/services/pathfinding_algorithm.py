"""
Pathfinding Algorithm

Handles Dijkstra's shortest path search over the network graph.
"""

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from ..models.route import PathStep
from .network_graph_builder import NetworkGraph


@dataclass
class QueueEntry:
    """Priority queue entry for the search."""
    distance: float
    sequence: int
    station_id: str

    def __lt__(self, other):
        # Shortest distance first, then first discovered
        if self.distance != other.distance:
            return self.distance < other.distance
        return self.sequence < other.sequence


@dataclass(frozen=True)
class PathResult:
    """A found path with its cumulative edge weight."""
    steps: List[PathStep]
    distance: float
    nodes_explored: int = 0


def _same_distance(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-12)


class PathfindingAlgorithm:
    """Single-source shortest path search with line-aware tie-breaking."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def find_path(self, graph: NetworkGraph, source_id: str, dest_id: str) -> Optional[PathResult]:
        """
        Find the shortest path between two stations.

        Args:
            graph: Network graph to search
            source_id: Starting station id
            dest_id: Destination station id

        Returns:
            PathResult if the destination is reachable, None otherwise
        """
        if source_id not in graph:
            self.logger.debug(f"Source station '{source_id}' has no connections in graph")
            return None
        if dest_id not in graph:
            self.logger.debug(f"Destination station '{dest_id}' has no connections in graph")
            return None

        if source_id == dest_id:
            return PathResult(steps=[PathStep(source_id, None)], distance=0.0)

        distances: Dict[str, float] = {source_id: 0.0}
        previous: Dict[str, str] = {}
        arrival_line: Dict[str, Optional[str]] = {source_id: None}
        visited: Set[str] = set()
        sequence = itertools.count()

        pq = [QueueEntry(0.0, next(sequence), source_id)]
        nodes_explored = 0

        while pq:
            current = heapq.heappop(pq)

            # Stale entry for an already finalised station
            if current.station_id in visited:
                continue

            visited.add(current.station_id)
            nodes_explored += 1

            if current.station_id == dest_id:
                break

            for edge in graph.neighbors(current.station_id):
                neighbor = edge.neighbor_id
                if neighbor in visited:
                    continue

                new_distance = current.distance + edge.weight
                old_distance = distances.get(neighbor)

                if old_distance is None or (new_distance < old_distance
                                            and not _same_distance(new_distance, old_distance)):
                    distances[neighbor] = new_distance
                    previous[neighbor] = current.station_id
                    arrival_line[neighbor] = edge.line_id
                    heapq.heappush(pq, QueueEntry(new_distance, next(sequence), neighbor))
                elif _same_distance(new_distance, old_distance):
                    if self._prefers_edge(current.station_id, edge.line_id, neighbor,
                                          previous, arrival_line):
                        previous[neighbor] = current.station_id
                        arrival_line[neighbor] = edge.line_id

        if dest_id not in visited:
            self.logger.debug(
                f"No path from '{source_id}' to '{dest_id}' after exploring {nodes_explored} nodes"
            )
            return None

        steps = self._reconstruct_path(source_id, dest_id, previous, arrival_line)
        self.logger.debug(
            f"Found path from '{source_id}' to '{dest_id}' after exploring {nodes_explored} nodes: "
            f"{' -> '.join(step.station_id for step in steps)}"
        )
        return PathResult(steps=steps, distance=distances[dest_id], nodes_explored=nodes_explored)

    def _prefers_edge(self, via_id: str, line_id: str, neighbor_id: str,
                      previous: Dict[str, str],
                      arrival_line: Dict[str, Optional[str]]) -> bool:
        """
        Decide whether an equal-distance edge replaces the recorded arrival.

        The new edge wins only if it stays on the line used to reach its
        predecessor and the recorded arrival does not; otherwise the first
        discovered arrival is kept. The source has no arrival line, so among
        equal parallel edges leaving it the first line in network order wins,
        even when another line would avoid a later interchange.
        """
        if line_id != arrival_line.get(via_id):
            return False

        recorded_via = previous.get(neighbor_id)
        if recorded_via is None:
            return False
        return arrival_line.get(neighbor_id) != arrival_line.get(recorded_via)

    def _reconstruct_path(self, source_id: str, dest_id: str,
                          previous: Dict[str, str],
                          arrival_line: Dict[str, Optional[str]]) -> List[PathStep]:
        """Walk predecessor links back from the destination and reverse."""
        steps = []
        station_id = dest_id
        while station_id != source_id:
            steps.append(PathStep(station_id, arrival_line[station_id]))
            station_id = previous[station_id]
        steps.reverse()

        # The source was not reached by an edge; it takes the first edge's line
        first_line = steps[0].line_id if steps else None
        return [PathStep(source_id, first_line)] + steps


def shortest_path(graph: NetworkGraph, source_id: str, dest_id: str) -> Optional[List[PathStep]]:
    """Get the station-by-station shortest path, or None when not found."""
    result = PathfindingAlgorithm().find_path(graph, source_id, dest_id)
    return result.steps if result is not None else None
