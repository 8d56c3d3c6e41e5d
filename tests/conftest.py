"""
Shared test fixtures.

Workflows are wired against the in-memory collaborators, so nothing
here needs a network or a database.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cabbooking.config import Settings
from cabbooking.domain.entities import Client, Location, Route
from cabbooking.domain.fare import FareCalculator
from cabbooking.services.container import build_container
from cabbooking.services.routes import RouteService
from cabbooking.workflows.booking import BookingWorkflow
from cabbooking.workflows.payment import PaymentWorkflow

WHITE_HOUSE = Location.at(38.8977, -77.0365, name="The White House")
CAPITOL = Location.at(38.8899, -77.0091, name="U.S. Capitol Building")


# ── Domain fixtures ───────────────────────────────────────────────────


@pytest.fixture
def john() -> Client:
    return Client(
        id=1,
        name="John Doe",
        email="john@example.com",
        phone="555-0100",
        address="1600 Pennsylvania Ave",
        credit_card="4111-1111-1111-1111",
    )


@pytest.fixture
def route() -> Route:
    """A 2.5-mile booked route; the fare with default rates is 10.50."""
    return Route(origin=WHITE_HOUSE, destination=CAPITOL, distance=2.5)


@pytest.fixture
def booking_workflow() -> BookingWorkflow:
    return BookingWorkflow(route_provider=RouteService())


@pytest.fixture
def payment_workflow(booking_workflow: BookingWorkflow) -> PaymentWorkflow:
    return PaymentWorkflow(fare_calculator=FareCalculator(), booking_workflow=booking_workflow)


# ── API fixtures ──────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def api() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by a fresh service container."""
    from cabbooking.api.app import create_app
    from cabbooking.api.dependencies import get_container
    from cabbooking.api.middleware import limiter

    limiter.reset()
    container = build_container(Settings())

    app = create_app()
    app.dependency_overrides[get_container] = lambda: container

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
