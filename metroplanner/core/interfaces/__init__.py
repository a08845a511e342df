"""
Core Interfaces Package

Abstract interfaces for the route service and its collaborators.
"""

from .i_route_service import IRouteService
from .i_network_store import INetworkStore
from .i_booking_sink import IBookingSink

__all__ = [
    'IRouteService',
    'INetworkStore',
    'IBookingSink'
]
