"""
Booking Service

In-memory booking sink that receives computed routes and issues references.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ..interfaces.i_booking_sink import IBookingSink
from ..models.booking import Booking
from ..models.route import ComputedRoute


class InMemoryBookingSink(IBookingSink):
    """Keeps bookings in submission order, keyed by an "MTR" reference."""

    REF_PREFIX = "MTR"

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the booking sink.

        Args:
            clock: Returns the current time, defaults to datetime.now
        """
        self.logger = logging.getLogger(__name__)
        self._clock = clock or datetime.now
        self._bookings: Dict[str, Booking] = {}
        self._lock = threading.Lock()

    def submit(self, route: ComputedRoute, fare: float) -> Booking:
        """Record a booking and return it with a fresh reference."""
        with self._lock:
            timestamp = self._clock()
            ref = self._next_reference(timestamp)
            booking = Booking(ref=ref, route=route, fare=fare, timestamp=timestamp)
            self._bookings[ref] = booking

        self.logger.info(f"Booked {route.source_id} -> {route.destination_id} as {ref} (fare {fare:.2f})")
        return booking

    def get(self, ref: str) -> Optional[Booking]:
        with self._lock:
            return self._bookings.get(ref)

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def _next_reference(self, timestamp: datetime) -> str:
        """Reference from epoch milliseconds, suffixed when already taken."""
        base = f"{self.REF_PREFIX}{int(timestamp.timestamp() * 1000)}"
        ref = base
        counter = 1
        while ref in self._bookings:
            ref = f"{base}-{counter}"
            counter += 1
        return ref
