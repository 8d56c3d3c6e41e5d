"""Route construction and the route accessors used by the workflows."""

from __future__ import annotations

import logging
import math
from typing import Optional

from cabbooking.domain.distance import distance_miles
from cabbooking.domain.entities import Location, Route
from cabbooking.domain.errors import RouteInvalidError

logger = logging.getLogger(__name__)


class RouteService:
    """Builds routes and implements :class:`~cabbooking.domain.ports.RouteProvider`."""

    def create_route(self, origin: Optional[Location], destination: Optional[Location]) -> Route:
        if origin is None or destination is None:
            raise RouteInvalidError("Route needs both a starting and a destination location")

        miles = distance_miles(origin, destination)
        logger.info("Route created: %s -> %s (%.2f miles)", origin, destination, miles)
        return Route(origin=origin, destination=destination, distance=miles)

    def location_from(self, route: Route) -> Location:
        if route.origin is None:
            raise RouteInvalidError("Route has no starting location")
        return route.origin

    def location_to(self, route: Route) -> Location:
        if route.destination is None:
            raise RouteInvalidError("Route has no destination location")
        return route.destination

    def route_distance(self, route: Route) -> float:
        if not math.isfinite(route.distance) or route.distance < 0:
            raise RouteInvalidError(f"Route distance is invalid: {route.distance}")
        return route.distance
