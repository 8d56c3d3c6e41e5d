"""
Booking Validation
==================

Rules are checked in a fixed order and the first failure wins:

1. client present
2. route present
3. client id is a positive integer
4. client name non-blank
5. client email has the ``local@domain`` shape
6. route has both endpoints
7. route distance is not negative
8. pickup and destination are different places

``validate`` never raises; it returns :class:`Ok` carrying an OPEN
booking or :class:`Err` carrying the reason and its message.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from .entities import Booking, Client, Route
from .enums import ValidationReason

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


@dataclass(frozen=True)
class ValidationFailure:
    reason: ValidationReason
    detail: str

    def __str__(self) -> str:
        return self.detail


@dataclass(frozen=True)
class Ok:
    booking: Booking

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    failure: ValidationFailure

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[Ok, Err]


def is_valid_email(email: Optional[str]) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email.strip()) is not None


def _is_blank(value: Optional[str]) -> bool:
    return not isinstance(value, str) or not value.strip()


class BookingValidator:
    def validate(self, client: Optional[Client], route: Optional[Route]) -> ValidationResult:
        failure = self._first_failure(client, route)
        if failure is not None:
            return Err(failure)
        return Ok(Booking(client_id=client.id, route=route))

    @staticmethod
    def _first_failure(
        client: Optional[Client], route: Optional[Route]
    ) -> Optional[ValidationFailure]:
        if client is None:
            return ValidationFailure(ValidationReason.CLIENT_MISSING, "Client cannot be null")
        if route is None:
            return ValidationFailure(ValidationReason.ROUTE_MISSING, "Route cannot be null")

        client_id = client.id
        if isinstance(client_id, bool) or not isinstance(client_id, int) or client_id <= 0:
            return ValidationFailure(
                ValidationReason.CLIENT_ID_INVALID, "Client must have a valid ID"
            )
        if _is_blank(client.name):
            return ValidationFailure(
                ValidationReason.CLIENT_NAME_INVALID, "Client must have a valid name"
            )
        if not is_valid_email(client.email):
            return ValidationFailure(
                ValidationReason.CLIENT_EMAIL_INVALID,
                f"Client email must be valid: {client.email}",
            )

        if route.origin is None or route.destination is None:
            return ValidationFailure(
                ValidationReason.ROUTE_ENDPOINTS_MISSING,
                "Route must have valid starting and destination locations",
            )
        # NaN fails this comparison as well
        if not route.distance >= 0:
            return ValidationFailure(
                ValidationReason.ROUTE_DISTANCE_NEGATIVE,
                f"Route distance cannot be negative: {route.distance}",
            )
        if route.origin.same_place_as(route.destination):
            return ValidationFailure(
                ValidationReason.SAME_PICKUP_AND_DESTINATION,
                "Cannot book cab for same pickup and destination location",
            )
        return None
