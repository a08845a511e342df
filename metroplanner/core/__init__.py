"""
Core Package

Routing engine: models, interfaces, services and exceptions.
"""

# Import exceptions
from .exceptions import (
    MetroPlannerError,
    UnknownStationError,
    InvalidNetworkTopologyError,
    NetworkDefinitionError,
    NetworkStoreError
)

# Import interfaces
from .interfaces import IRouteService, INetworkStore, IBookingSink

# Import models
from .models import (
    Station, InterchangeStation, MetroLine, MetroNetwork,
    PathStep, RouteSegment, ComputedRoute, RouteNotFound, Booking
)

# Import services
from .services import (
    NetworkGraph, NetworkGraphBuilder, build_graph,
    PathfindingAlgorithm, shortest_path,
    RouteConverter, compose,
    InterchangeDetectionService, detect_interchanges, interchanges_of,
    FareCalculator, calculate_fare,
    RouteService, plan_route,
    JsonNetworkStore, snapshot_version,
    InMemoryBookingSink, StationService, ServiceFactory
)

__all__ = [
    # Exceptions
    'MetroPlannerError',
    'UnknownStationError',
    'InvalidNetworkTopologyError',
    'NetworkDefinitionError',
    'NetworkStoreError',

    # Interfaces
    'IRouteService',
    'INetworkStore',
    'IBookingSink',

    # Models
    'Station',
    'InterchangeStation',
    'MetroLine',
    'MetroNetwork',
    'PathStep',
    'RouteSegment',
    'ComputedRoute',
    'RouteNotFound',
    'Booking',

    # Services
    'NetworkGraph',
    'NetworkGraphBuilder',
    'build_graph',
    'PathfindingAlgorithm',
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
