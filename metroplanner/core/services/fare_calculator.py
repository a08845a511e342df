"""
Fare Calculator

Maps a computed route to a fare using fixed pricing constants.
"""

from typing import Optional

from ...managers.config_manager import FareConfig
from ..models.route import ComputedRoute


class FareCalculator:
    """
    Pure fare calculation.

    fare = base_fare + total_stations * per_station_fare
           + interchange_count * interchange_fee

    All constants are non-negative, so the fare is never negative and never
    decreases as stations or interchanges are added.
    """

    def __init__(self, fare_config: Optional[FareConfig] = None):
        self._fare_config = fare_config or FareConfig()

    @property
    def fare_config(self) -> FareConfig:
        return self._fare_config

    def calculate_fare(self, route: ComputedRoute) -> float:
        """Calculate the fare for a route."""
        return self.fare_for(route.total_stations, route.interchange_count)

    def fare_for(self, total_stations: int, interchange_count: int) -> float:
        """Calculate the fare from station and interchange counts."""
        config = self._fare_config
        return (config.base_fare
                + max(total_stations, 0) * config.per_station_fare
                + max(interchange_count, 0) * config.interchange_fee)


def calculate_fare(route: ComputedRoute, fare_config: Optional[FareConfig] = None) -> float:
    """Calculate the fare for a route with the given (or default) pricing."""
    return FareCalculator(fare_config).calculate_fare(route)
