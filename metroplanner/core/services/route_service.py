"""
Route Service Implementation

Plans routes by running the full pipeline: graph build, shortest path,
segment composition, interchange detection and duration estimate.
"""

import logging
import math
from typing import Optional, Union

from ...managers.config_manager import FareConfig, RoutingConfig
from ..exceptions import UnknownStationError
from ..interfaces.i_route_service import IRouteService
from ..models.network import MetroNetwork
from ..models.route import ComputedRoute, PathStep, RouteNotFound
from .fare_calculator import FareCalculator
from .interchange_detection_service import InterchangeDetectionService
from .network_graph_builder import NetworkGraphBuilder
from .pathfinding_algorithm import PathfindingAlgorithm
from .route_converter import RouteConverter


class RouteService(IRouteService):
    """
    Route planning over a caller-supplied network snapshot.

    The service keeps no graph or network between calls; every query builds
    its graph from the snapshot it is given.
    """

    def __init__(self, fare_config: Optional[FareConfig] = None,
                 routing_config: Optional[RoutingConfig] = None):
        """
        Initialize the route service.

        Args:
            fare_config: Pricing constants, defaults to FareConfig()
            routing_config: Duration estimate settings, defaults to RoutingConfig()
        """
        self.logger = logging.getLogger(__name__)
        self.routing_config = routing_config or RoutingConfig()

        self.graph_builder = NetworkGraphBuilder()
        self.pathfinding = PathfindingAlgorithm()
        self.route_converter = RouteConverter()
        self.interchange_detection = InterchangeDetectionService()
        self.fare_calculator = FareCalculator(fare_config)

    def plan_route(self, network: MetroNetwork, source_id: str,
                   dest_id: str) -> Union[ComputedRoute, RouteNotFound]:
        """Plan the lowest-distance route between two stations."""
        for station_id in (source_id, dest_id):
            if not network.has_station(station_id):
                raise UnknownStationError(station_id)

        if source_id == dest_id:
            return self._build_route(network, source_id, dest_id, [PathStep(source_id, None)], 0.0)

        graph = self.graph_builder.build(network)

        for station_id in (source_id, dest_id):
            if station_id not in graph:
                raise UnknownStationError(station_id, "station has no connections")

        result = self.pathfinding.find_path(graph, source_id, dest_id)
        if result is None:
            self.logger.info(f"No route from '{source_id}' to '{dest_id}'")
            return RouteNotFound(source_id, dest_id)

        return self._build_route(network, source_id, dest_id, result.steps, result.distance)

    def calculate_fare(self, route: ComputedRoute) -> float:
        """Calculate the fare for a computed route."""
        return self.fare_calculator.calculate_fare(route)

    def estimate_duration(self, total_distance: float, interchange_count: int) -> int:
        """Estimate journey minutes from distance and interchanges."""
        config = self.routing_config
        travel_minutes = math.ceil(total_distance / config.distance_per_minute)
        return int(travel_minutes + interchange_count * config.interchange_minutes)

    def _build_route(self, network: MetroNetwork, source_id: str, dest_id: str,
                     path, total_distance: float) -> ComputedRoute:
        segments = self.route_converter.compose(network, path)
        interchanges = self.interchange_detection.interchanges_of(segments)

        route = ComputedRoute(
            source_id=source_id,
            destination_id=dest_id,
            segments=tuple(segments),
            total_stations=len(path),
            total_distance=total_distance,
            interchanges=tuple(interchanges),
            duration=self.estimate_duration(total_distance, len(interchanges)),
        )
        self.logger.info(
            f"Planned route {source_id} -> {dest_id}: {len(segments)} segments, "
            f"{len(interchanges)} interchanges, distance {total_distance:.2f}"
        )
        return route


def plan_route(network: MetroNetwork, source_id: str,
               dest_id: str) -> Union[ComputedRoute, RouteNotFound]:
    """Plan a route with the default fare and routing configuration."""
    return RouteService().plan_route(network, source_id, dest_id)
