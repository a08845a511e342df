"""
Booking Sink Interface

Interface for receiving computed routes for booking and display.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.booking import Booking
from ..models.route import ComputedRoute


class IBookingSink(ABC):
    """Interface for booking sink operations."""

    @abstractmethod
    def submit(self, route: ComputedRoute, fare: float) -> Booking:
        """
        Record a booking for a computed route.

        Args:
            route: Route chosen by the passenger
            fare: Fare charged for the route

        Returns:
            Booking with its reference
        """
        pass

    @abstractmethod
    def get(self, ref: str) -> Optional[Booking]:
        """Get a booking by reference."""
        pass

    @abstractmethod
    def list_bookings(self) -> List[Booking]:
        """Get all bookings in submission order."""
        pass
