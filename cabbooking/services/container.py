"""Wires settings and collaborators into the two workflows."""

from __future__ import annotations

from dataclasses import dataclass

from cabbooking.config import Settings
from cabbooking.domain.fare import FareCalculator
from cabbooking.services.clients import InMemoryClientDirectory
from cabbooking.services.locations import LocationService
from cabbooking.services.routes import RouteService
from cabbooking.workflows.booking import BookingWorkflow
from cabbooking.workflows.payment import PaymentWorkflow


@dataclass
class ServiceContainer:
    settings: Settings
    fare_calculator: FareCalculator
    locations: LocationService
    routes: RouteService
    clients: InMemoryClientDirectory
    bookings: BookingWorkflow
    payments: PaymentWorkflow


def build_container(settings: Settings) -> ServiceContainer:
    fare_calculator = FareCalculator(settings.fare_config())
    locations = LocationService()
    locations.initialize_washington_dc_locations()
    routes = RouteService()

    bookings = BookingWorkflow(
        route_provider=routes,
        distance_tolerance_miles=settings.distance_tolerance_miles,
    )
    payments = PaymentWorkflow(
        fare_calculator=fare_calculator,
        booking_workflow=bookings,
        payment_tolerance=settings.payment_tolerance,
        card_min_digits=settings.card_min_digits,
        card_max_digits=settings.card_max_digits,
    )
    return ServiceContainer(
        settings=settings,
        fare_calculator=fare_calculator,
        locations=locations,
        routes=routes,
        clients=InMemoryClientDirectory(),
        bookings=bookings,
        payments=payments,
    )
