"""
Core Models Package

Data models for the metro network and computed routes.
"""

from .station import Station, InterchangeStation
from .metro_line import MetroLine
from .network import MetroNetwork
from .route import PathStep, RouteSegment, ComputedRoute, RouteNotFound
from .booking import Booking

__all__ = [
    'Station',
    'InterchangeStation',
    'MetroLine',
    'MetroNetwork',
    'PathStep',
    'RouteSegment',
    'ComputedRoute',
    'RouteNotFound',
    'Booking'
]
