"""
Payment endpoints
=================

POST /api/v1/payments/request     -- amount owed for a route
POST /api/v1/payments/confirm     -- pay and complete the booking
POST /api/v1/payments/eligibility -- can this client pay for this route?
POST /api/v1/payments/summary     -- recap with masked card
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from cabbooking.api.dependencies import get_container, resolve_booking, resolve_route
from cabbooking.api.middleware import RATE_LIMIT, limiter
from cabbooking.api.schemas import (
    ERROR_RESPONSES,
    AmountResponse,
    BookingRequest,
    BookingResponse,
    PaymentConfirmRequest,
    SummaryResponse,
    ValidityResponse,
)
from cabbooking.services.container import ServiceContainer

router = APIRouter(prefix="/payments", tags=["payments"], responses=ERROR_RESPONSES)


@router.post("/request", response_model=AmountResponse, summary="Request payment")
@limiter.limit(RATE_LIMIT)
async def request_payment(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    client, route = resolve_booking(container, body)
    return AmountResponse(amount=container.payments.request_payment(client, route))


@router.post(
    "/confirm",
    response_model=BookingResponse,
    summary="Confirm payment",
    description=(
        "Checks the card against the card on file and the amount against "
        "the fare, then completes the booking. A 500 with "
        "``payment_accepted`` set means the charge stands but the booking "
        "could not be completed."
    ),
)
@limiter.limit(RATE_LIMIT)
async def confirm_payment(
    request: Request,
    body: PaymentConfirmRequest,
    container: ServiceContainer = Depends(get_container),
):
    client, route = resolve_booking(container, body)
    booking = container.payments.payment_confirmation(
        client, route, body.payment_amount, body.card_number
    )
    return BookingResponse.from_domain(booking)


@router.post("/eligibility", response_model=ValidityResponse, summary="Payment eligibility")
@limiter.limit(RATE_LIMIT)
async def payment_eligibility(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    client = container.clients.find_by_id(body.client_id)
    route = resolve_route(container, body.route)
    return ValidityResponse(valid=container.payments.can_process_payment(client, route))


@router.post("/summary", response_model=SummaryResponse, summary="Payment summary")
@limiter.limit(RATE_LIMIT)
async def payment_summary(
    request: Request,
    body: BookingRequest,
    container: ServiceContainer = Depends(get_container),
):
    client, route = resolve_booking(container, body)
    return SummaryResponse(summary=container.payments.payment_summary(client, route))
