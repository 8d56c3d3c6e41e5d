"""
Collaborator interfaces consumed by the workflows.

Implementations are injected at construction, so the workflows never
know whether routes come from the in-memory catalog or somewhere else.
Providers signal bad data by raising
:class:`~cabbooking.domain.errors.RouteInvalidError` or
:class:`~cabbooking.domain.errors.LocationInvalidError`.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .entities import Client, Location, Route


@runtime_checkable
class RouteProvider(Protocol):
    def location_from(self, route: Route) -> Location: ...

    def location_to(self, route: Route) -> Location: ...

    def route_distance(self, route: Route) -> float: ...


@runtime_checkable
class ClientDirectory(Protocol):
    def find_by_id(self, client_id: int) -> Optional[Client]: ...
