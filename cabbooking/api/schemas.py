"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from cabbooking.domain.entities import Booking, Client, Location, Route


# ── Requests ──────────────────────────────────────────────────────────


class LocationIn(BaseModel):
    name: Optional[str] = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Location:
        return Location.at(self.latitude, self.longitude, name=self.name)


class RouteIn(BaseModel):
    origin: LocationIn
    destination: LocationIn
    distance: Optional[float] = Field(
        None,
        description="Booked distance in miles; computed from the coordinates when omitted.",
    )


class RouteCreateRequest(BaseModel):
    from_location: str = Field(..., description="Name of a catalog location.")
    to_location: str = Field(..., description="Name of a catalog location.")


class BookingRequest(BaseModel):
    client_id: int
    route: RouteIn


class PaymentConfirmRequest(BookingRequest):
    payment_amount: float
    card_number: str


class ClientCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=255)
    phone: Optional[str] = None
    address: Optional[str] = None
    credit_card: Optional[str] = Field(None, pattern=r"^[0-9\s-]*$")


# ── Responses ─────────────────────────────────────────────────────────


class LocationResponse(BaseModel):
    name: Optional[str] = None
    latitude: float
    longitude: float

    @classmethod
    def from_domain(cls, location: Location) -> LocationResponse:
        return cls(name=location.name, latitude=location.latitude, longitude=location.longitude)


class RouteResponse(BaseModel):
    origin: LocationResponse
    destination: LocationResponse
    distance: float

    @classmethod
    def from_domain(cls, route: Route) -> RouteResponse:
        return cls(
            origin=LocationResponse.from_domain(route.origin),
            destination=LocationResponse.from_domain(route.destination),
            distance=route.distance,
        )


class ClientResponse(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    has_credit_card: bool = False

    @classmethod
    def from_domain(cls, client: Client) -> ClientResponse:
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
            has_credit_card=bool(client.credit_card and client.credit_card.strip()),
        )


class BookingResponse(BaseModel):
    client_id: int
    status: str
    route: RouteResponse
    recomputed_distance_miles: Optional[float] = None
    distance_mismatch: bool = False
    fare: Optional[float] = None

    @classmethod
    def from_domain(cls, booking: Booking) -> BookingResponse:
        return cls(
            client_id=booking.client_id,
            status=booking.status.value,
            route=RouteResponse.from_domain(booking.route),
            recomputed_distance_miles=booking.recomputed_distance_miles,
            distance_mismatch=booking.distance_mismatch,
            fare=booking.fare,
        )


class AmountResponse(BaseModel):
    amount: float


class ValidityResponse(BaseModel):
    valid: bool


class SummaryResponse(BaseModel):
    summary: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
    # set only when a charge went through but the booking did not complete
    payment_accepted: Optional[bool] = None


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input or collaborator failure"},
    404: {"model": ErrorResponse, "description": "Unknown client or location"},
    409: {"model": ErrorResponse, "description": "Illegal booking state transition"},
    500: {"model": ErrorResponse, "description": "Booking or payment processing failed"},
}
