"""
Domain entities with business logic.

Patterns used
-------------
- **Value Objects**: ``Coordinate`` and ``Location`` are immutable; two
  locations at the same coordinate are the same place for distance and
  booking purposes, whatever their names.
- **State Pattern** on ``Booking``: enforces valid lifecycle transitions
  (OPEN -> ACTIVE -> COMPLETED).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .enums import BOOKING_TRANSITIONS, BookingStatus
from .errors import CabBookingError


class InvalidStateTransition(CabBookingError):
    """Raised when a booking status change violates the state machine."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError("Coordinates must be finite numbers")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude must be between -90 and 90, got: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"Longitude must be between -180 and 180, got: {self.longitude}"
            )


@dataclass(frozen=True)
class Location:
    coordinate: Coordinate
    name: Optional[str] = None

    @classmethod
    def at(cls, latitude: float, longitude: float, name: Optional[str] = None) -> Location:
        return cls(Coordinate(latitude, longitude), name)

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    def same_place_as(self, other: Location) -> bool:
        return self.coordinate == other.coordinate

    def __str__(self) -> str:
        label = self.name or "Unnamed location"
        return f"{label} ({self.latitude:.4f}, {self.longitude:.4f})"


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Route:
    origin: Optional[Location] = None
    destination: Optional[Location] = None
    distance: float = 0.0  # miles; the booked distance used for the fare


@dataclass
class Client:
    id: int = 0
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    credit_card: Optional[str] = None


# one client travelling between two coordinates
BookingKey = tuple[int, Coordinate, Coordinate]


@dataclass
class Booking:
    client_id: int
    route: Route
    status: BookingStatus = BookingStatus.OPEN
    recomputed_distance_miles: Optional[float] = None
    distance_mismatch: bool = False
    fare: Optional[float] = None

    def transition_to(self, new_status: BookingStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = BOOKING_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition from {self.status.value} to {new_status.value}"
            )
        self.status = new_status

