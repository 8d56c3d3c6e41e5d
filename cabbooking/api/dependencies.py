"""FastAPI dependency injection helpers."""

from __future__ import annotations

from functools import lru_cache

from cabbooking.api.schemas import BookingRequest, RouteIn
from cabbooking.config import settings
from cabbooking.domain.entities import Client, Route
from cabbooking.domain.errors import ClientNotFoundError
from cabbooking.services.container import ServiceContainer, build_container


@lru_cache
def get_container() -> ServiceContainer:
    """Process-wide container; tests swap it via ``dependency_overrides``."""
    return build_container(settings)


def resolve_client(container: ServiceContainer, client_id: int) -> Client:
    client = container.clients.find_by_id(client_id)
    if client is None:
        raise ClientNotFoundError(f"Client with ID {client_id} not found")
    return client


def resolve_route(container: ServiceContainer, body: RouteIn) -> Route:
    origin = body.origin.to_domain()
    destination = body.destination.to_domain()
    if body.distance is None:
        return container.routes.create_route(origin, destination)
    return Route(origin=origin, destination=destination, distance=body.distance)


def resolve_booking(container: ServiceContainer, body: BookingRequest) -> tuple[Client, Route]:
    return resolve_client(container, body.client_id), resolve_route(container, body.route)
