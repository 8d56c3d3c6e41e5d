"""
Booking endpoints
=================

POST /api/v1/bookings          -- validate and activate a booking
POST /api/v1/bookings/finish   -- complete an active booking
POST /api/v1/bookings/validate -- non-throwing validity check
POST /api/v1/bookings/summary  -- human-readable recap
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from cabbooking.api.dependencies import get_container, resolve_booking, resolve_route
from cabbooking.api.middleware import RATE_LIMIT, limiter
from cabbooking.api.schemas import (
    ERROR_RESPONSES,
    BookingRequest,
    BookingResponse,
    SummaryResponse,
    ValidityResponse,
)
from cabbooking.services.container import ServiceContainer

router = APIRouter(prefix="/bookings", tags=["bookings"], responses=ERROR_RESPONSES)


@router.post("", status_code=201, response_model=BookingResponse, summary="Book a cab")
@limiter.limit(RATE_LIMIT)
async def book_cab(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    client, route = resolve_booking(container, body)
    return BookingResponse.from_domain(container.bookings.book_cab(client, route))


@router.post("/finish", response_model=BookingResponse, summary="Finish a booking")
@limiter.limit(RATE_LIMIT)
async def finish_booking(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    client, route = resolve_booking(container, body)
    return BookingResponse.from_domain(container.bookings.finish_booking_cab(client, route))


@router.post("/validate", response_model=ValidityResponse, summary="Check a booking request")
@limiter.limit(RATE_LIMIT)
async def validate_booking(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    # An unknown client is simply not bookable.
    client = container.clients.find_by_id(body.client_id)
    route = resolve_route(container, body.route)
    return ValidityResponse(valid=container.bookings.is_valid_booking(client, route))


@router.post("/summary", response_model=SummaryResponse, summary="Booking summary")
@limiter.limit(RATE_LIMIT)
async def booking_summary(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    client, route = resolve_booking(container, body)
    return SummaryResponse(summary=container.bookings.booking_summary(client, route))
