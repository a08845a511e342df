"""
Booking Model

A computed route handed to the booking sink together with its fare.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any

from .route import ComputedRoute


@dataclass(frozen=True)
class Booking:
    """Represents a booked journey."""

    ref: str
    route: ComputedRoute
    fare: float
    timestamp: datetime

    def __post_init__(self):
        if not self.ref:
            raise ValueError("Booking reference cannot be empty")
        if self.fare < 0:
            raise ValueError("Fare cannot be negative")

    @property
    def source_id(self) -> str:
        return self.route.source_id

    @property
    def destination_id(self) -> str:
        return self.route.destination_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ref": self.ref,
            "from": self.source_id,
            "to": self.destination_id,
            "fare": round(self.fare, 2),
            "timestamp": self.timestamp.isoformat(),
            "route": self.route.to_dict(),
        }
