"""
Route Service Interface

Interface for route planning and fare services.
"""

from abc import ABC, abstractmethod
from typing import Union

from ..models.network import MetroNetwork
from ..models.route import ComputedRoute, RouteNotFound


class IRouteService(ABC):
    """Interface for route planning services."""

    @abstractmethod
    def plan_route(self, network: MetroNetwork, source_id: str,
                   dest_id: str) -> Union[ComputedRoute, RouteNotFound]:
        """
        Plan the lowest-distance route between two stations.

        Args:
            network: Network snapshot to plan against
            source_id: Starting station id
            dest_id: Destination station id

        Returns:
            ComputedRoute if a path exists, RouteNotFound otherwise

        Raises:
            UnknownStationError: If either station is absent from the network
        """
        pass

    @abstractmethod
    def calculate_fare(self, route: ComputedRoute) -> float:
        """
        Calculate the fare for a computed route.

        Args:
            route: Route to price

        Returns:
            Non-negative fare
        """
        pass
