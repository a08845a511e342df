"""
Service Factory

Factory for creating and wiring core service instances from configuration.
"""

import logging
from typing import Optional

from ...managers.config_manager import ConfigData
from ..interfaces.i_booking_sink import IBookingSink
from ..interfaces.i_network_store import INetworkStore
from ..interfaces.i_route_service import IRouteService
from ..models.network import MetroNetwork
from .booking_service import InMemoryBookingSink
from .json_network_store import JsonNetworkStore
from .route_service import RouteService
from .station_service import StationService


class ServiceFactory:
    """
    Factory for creating and managing core service instances.

    The factory never holds a network snapshot: callers load one from the
    store and pass it to every planning call.
    """

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults to ConfigData()
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigData()

        self._network_store: Optional[INetworkStore] = None
        self._route_service: Optional[IRouteService] = None
        self._booking_sink: Optional[IBookingSink] = None

    def get_network_store(self) -> INetworkStore:
        """Get or create the network store instance."""
        if self._network_store is None:
            self._network_store = JsonNetworkStore(self.config.store.network_path)
            self.logger.info("Created JsonNetworkStore instance")

        return self._network_store

    def get_route_service(self) -> IRouteService:
        """Get or create the route service instance."""
        if self._route_service is None:
            self._route_service = RouteService(self.config.fare, self.config.routing)
            self.logger.info("Created RouteService instance")

        return self._route_service

    def get_booking_sink(self) -> IBookingSink:
        """Get or create the booking sink instance."""
        if self._booking_sink is None:
            self._booking_sink = InMemoryBookingSink()
            self.logger.info("Created InMemoryBookingSink instance")

        return self._booking_sink

    def get_station_service(self, network: MetroNetwork) -> StationService:
        """Create a station service bound to one snapshot."""
        return StationService(network)

    def shutdown(self) -> None:
        """Release service instances."""
        self._network_store = None
        self._route_service = None
        self._booking_sink = None
        self.logger.info("All services shut down successfully")
