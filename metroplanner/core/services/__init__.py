"""
Core Services Package

Routing engine services and collaborator implementations.
"""

from .network_graph_builder import NetworkGraph, NetworkGraphBuilder, GraphEdge, build_graph
from .pathfinding_algorithm import PathfindingAlgorithm, PathResult, shortest_path
from .route_converter import RouteConverter, compose
from .interchange_detection_service import (
    InterchangeDetectionService,
    detect_interchanges,
    interchanges_of
)
from .fare_calculator import FareCalculator, calculate_fare
from .route_service import RouteService, plan_route
from .json_network_store import JsonNetworkStore, snapshot_version
from .booking_service import InMemoryBookingSink
from .station_service import StationService
from .service_factory import ServiceFactory

__all__ = [
    'NetworkGraph',
    'NetworkGraphBuilder',
    'GraphEdge',
    'build_graph',
    'PathfindingAlgorithm',
    'PathResult',
    'shortest_path',
    'RouteConverter',
    'compose',
    'InterchangeDetectionService',
    'detect_interchanges',
    'interchanges_of',
    'FareCalculator',
    'calculate_fare',
    'RouteService',
    'plan_route',
    'JsonNetworkStore',
    'snapshot_version',
    'InMemoryBookingSink',
    'StationService',
    'ServiceFactory'
]
