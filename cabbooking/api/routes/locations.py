"""
Location & route endpoints
==========================

GET  /api/v1/locations -- list the location catalog
POST /api/v1/routes    -- build a route between two catalog locations
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from cabbooking.api.dependencies import get_container
from cabbooking.api.middleware import RATE_LIMIT, limiter
from cabbooking.api.schemas import (
    ERROR_RESPONSES,
    LocationResponse,
    RouteCreateRequest,
    RouteResponse,
)
from cabbooking.services.container import ServiceContainer

router = APIRouter(tags=["locations"], responses=ERROR_RESPONSES)


@router.get("/locations", response_model=list[LocationResponse], summary="List locations")
@limiter.limit(RATE_LIMIT)
async def list_locations(
    request: Request,
    container: ServiceContainer = Depends(get_container),
):
    return [LocationResponse.from_domain(loc) for loc in container.locations.available_locations()]


@router.post("/routes", response_model=RouteResponse, summary="Create a route")
@limiter.limit(RATE_LIMIT)
async def create_route(
    request: Request,
    body: RouteCreateRequest,
    container: ServiceContainer = Depends(get_container),
):
    origin = container.locations.get_location(body.from_location)
    destination = container.locations.get_location(body.to_location)
    return RouteResponse.from_domain(container.routes.create_route(origin, destination))
