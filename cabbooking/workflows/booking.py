"""
Booking Workflow
================

Drives a booking through its lifecycle::

    OPEN --book_cab--> ACTIVE --finish_booking_cab--> COMPLETED

``book_cab`` validates the (client, route) pair, independently recomputes
the route distance and records the booking as ACTIVE.  A booked distance
that disagrees with the recomputed one is logged and flagged on the
booking; it never blocks the booking.

Failures raised by the route provider are translated into
:class:`BookingProcessError` so callers only ever see this package's
error vocabulary.

Concurrency
-----------
The ledger is a plain dict.  At most one in-flight workflow per booking
is assumed; callers allowing concurrent requests against the same
booking must serialise them.

Ledger growth
-------------
COMPLETED bookings stay in the ledger so a repeated finish is a no-op.
Long-running processes should call :meth:`BookingWorkflow.purge_completed`
periodically to release them.
"""

from __future__ import annotations

import logging
from typing import Optional

from cabbooking.domain.distance import distance_km, km_to_miles
from cabbooking.domain.entities import Booking, BookingKey, Client, Location, Route
from cabbooking.domain.enums import BookingStatus
from cabbooking.domain.errors import (
    BookingProcessError,
    CollaboratorError,
    InvalidBookingError,
)
from cabbooking.domain.ports import RouteProvider
from cabbooking.domain.validation import BookingValidator, Err

logger = logging.getLogger(__name__)

DEFAULT_DISTANCE_TOLERANCE_MILES = 0.05


class BookingWorkflow:
    def __init__(
        self,
        route_provider: RouteProvider,
        validator: BookingValidator | None = None,
        distance_tolerance_miles: float = DEFAULT_DISTANCE_TOLERANCE_MILES,
    ):
        self.route_provider = route_provider
        self.validator = validator or BookingValidator()
        self.distance_tolerance_miles = distance_tolerance_miles
        self._bookings: dict[BookingKey, Booking] = {}

    # ── Public API ────────────────────────────────────────────────────

    def book_cab(self, client: Optional[Client], route: Optional[Route]) -> Booking:
        """Validate the pair and move its booking to ACTIVE."""
        booking = self._validated_booking(client, route)

        try:
            origin = self.route_provider.location_from(route)
            destination = self.route_provider.location_to(route)
            booked_miles = self.route_provider.route_distance(route)
        except CollaboratorError as exc:
            raise self._process_error(exc) from exc

        km = distance_km(
            origin.latitude, origin.longitude,
            destination.latitude, destination.longitude,
        )
        miles = km_to_miles(km)
        logger.info(
            "Distance report: %s -> %s: %.2f km (%.2f miles)",
            origin, destination, km, miles,
        )

        booking.recomputed_distance_miles = miles
        if abs(miles - booked_miles) > self.distance_tolerance_miles:
            booking.distance_mismatch = True
            logger.warning(
                "Route distance mismatch for client %s: booked %.2f miles, "
                "recomputed %.2f miles",
                client.id, booked_miles, miles,
            )

        booking.transition_to(BookingStatus.ACTIVE)
        self._bookings[_ledger_key(client.id, origin, destination)] = booking
        logger.info("Cab booked for client %s from %s to %s", client.id, origin, destination)
        return booking

    def finish_booking_cab(self, client: Optional[Client], route: Optional[Route]) -> Booking:
        """Move the pair's ACTIVE booking to COMPLETED.

        Calling it again on a COMPLETED booking is a no-op.  Only the
        presence of client and route is re-checked here.
        """
        if client is None:
            raise InvalidBookingError("Client cannot be null")
        if route is None:
            raise InvalidBookingError("Route cannot be null")

        try:
            origin = self.route_provider.location_from(route)
            destination = self.route_provider.location_to(route)
        except CollaboratorError as exc:
            raise self._process_error(exc) from exc

        booking = self._bookings.get(_ledger_key(client.id, origin, destination))
        if booking is None:
            raise InvalidBookingError(f"No active booking for client {client.id} on this route")
        if booking.status is BookingStatus.COMPLETED:
            logger.debug("Booking for client %s already completed", client.id)
            return booking

        booking.transition_to(BookingStatus.COMPLETED)
        logger.info(
            "Your cab from %s to %s is booked! We hope you enjoy your ride!",
            origin, destination,
        )
        return booking

    def is_valid_booking(self, client: Optional[Client], route: Optional[Route]) -> bool:
        try:
            return not isinstance(self.validator.validate(client, route), Err)
        except (AttributeError, TypeError, ValueError):
            return False

    def booking_summary(self, client: Optional[Client], route: Optional[Route]) -> str:
        self._validated_booking(client, route)

        try:
            origin = self.route_provider.location_from(route)
            destination = self.route_provider.location_to(route)
            miles = self.route_provider.route_distance(route)
        except CollaboratorError as exc:
            raise self._process_error(exc) from exc

        return (
            f"Booking Summary for {client.name}:\n"
            f"Email: {client.email}\n"
            f"From: {origin.name or 'Unnamed location'}\n"
            f"To: {destination.name or 'Unnamed location'}\n"
            f"Distance: {miles:.2f} miles"
        )

    def get_booking(self, client_id: int, route: Route) -> Optional[Booking]:
        try:
            origin = self.route_provider.location_from(route)
            destination = self.route_provider.location_to(route)
        except CollaboratorError:
            return None
        return self._bookings.get(_ledger_key(client_id, origin, destination))

    def purge_completed(self) -> int:
        """Drop COMPLETED bookings from the ledger; returns how many went.

        Finishing a purged booking again raises instead of being a no-op.
        """
        done = [k for k, b in self._bookings.items() if b.status is BookingStatus.COMPLETED]
        for key in done:
            del self._bookings[key]
        if done:
            logger.info("Purged %d completed bookings", len(done))
        return len(done)

    # ── Internals ─────────────────────────────────────────────────────

    def _validated_booking(self, client: Optional[Client], route: Optional[Route]) -> Booking:
        result = self.validator.validate(client, route)
        if isinstance(result, Err):
            raise InvalidBookingError(result.failure.detail)
        return result.booking

    @staticmethod
    def _process_error(exc: CollaboratorError) -> BookingProcessError:
        logger.warning("Route provider failed: %s", exc)
        return BookingProcessError(f"Cannot book cab due to invalid route/location: {exc}")


def _ledger_key(client_id: int, origin: Location, destination: Location) -> BookingKey:
    """Keyed on the provider's locations so booking and finishing agree."""
    return (client_id, origin.coordinate, destination.coordinate)
