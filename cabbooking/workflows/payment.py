"""
Payment Workflow
================

``request_payment`` quotes the fare for a route; ``payment_confirmation``
checks the submitted card and amount and then completes the booking.

Confirmation checks, first failure wins
---------------------------------------
1. client / route present, client name and email non-blank
2. amount is a finite, positive number
3. card number supplied
4. card number has 13-19 digits once spaces and dashes are stripped
5. client has a card on file
6. submitted card matches the card on file
7. amount within one cent of the expected fare
8. booking completed -- a failure here is reported as
   :class:`BookingCompletionError`: the payment itself stands.

The fare is always computed from the route's booked distance.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from cabbooking.domain.cards import (
    MAX_CARD_DIGITS,
    MIN_CARD_DIGITS,
    is_valid_card_format,
    mask_card_number,
    normalize_card_number,
)
from cabbooking.domain.entities import Booking, Client, Route
from cabbooking.domain.errors import (
    BookingCompletionError,
    CabBookingError,
    CreditCardError,
    FareCalculationError,
    InvalidPaymentError,
    PaymentProcessError,
)
from cabbooking.domain.fare import FareCalculator
from cabbooking.workflows.booking import BookingWorkflow

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_TOLERANCE = 0.01


class PaymentWorkflow:
    def __init__(
        self,
        fare_calculator: FareCalculator,
        booking_workflow: BookingWorkflow,
        payment_tolerance: float = DEFAULT_PAYMENT_TOLERANCE,
        card_min_digits: int = MIN_CARD_DIGITS,
        card_max_digits: int = MAX_CARD_DIGITS,
    ):
        self.fare_calculator = fare_calculator
        self.booking_workflow = booking_workflow
        self.payment_tolerance = payment_tolerance
        self.card_min_digits = card_min_digits
        self.card_max_digits = card_max_digits

    # ── Public API ────────────────────────────────────────────────────

    def request_payment(self, client: Optional[Client], route: Optional[Route]) -> float:
        """Return the amount the client owes for *route*."""
        self._validate_payment_inputs(client, route)
        fare = self._fare_for(route, "request payment")
        logger.info(
            "%s, please pay $%.2f to finish booking your cab (request sent to %s)",
            client.name, fare, client.email,
        )
        return fare

    def payment_confirmation(
        self,
        client: Optional[Client],
        route: Optional[Route],
        payment_amount: float,
        card_number: Optional[str],
    ) -> Booking:
        """Accept the payment and complete the booking, or raise."""
        self._validate_payment_inputs(client, route)
        self._validate_amount(payment_amount)
        self._validate_card(card_number, client.credit_card)

        expected = self._fare_for(route, "confirm payment")
        if abs(payment_amount - expected) > self.payment_tolerance:
            raise InvalidPaymentError(
                f"Incorrect payment amount. Expected: ${expected:.2f} "
                f"Received: ${payment_amount:.2f}"
            )

        masked = mask_card_number(client.credit_card)
        logger.info(
            "Payment from %s confirmed: $%.2f charged to card ending in %s",
            client.name, expected, masked,
        )

        try:
            booking = self.booking_workflow.finish_booking_cab(client, route)
        except Exception as exc:
            # the charge stands whatever the provider raised
            logger.error("Payment accepted for client %s but booking completion failed: %s",
                         client.id, exc)
            raise BookingCompletionError(
                f"Payment processed but booking completion failed: {exc}"
            ) from exc

        booking.fare = expected
        return booking

    def can_process_payment(self, client: Optional[Client], route: Optional[Route]) -> bool:
        try:
            self._validate_payment_inputs(client, route)
            if not is_valid_card_format(
                client.credit_card, self.card_min_digits, self.card_max_digits
            ):
                return False
            self._fare_for(route, "check payment")
            return True
        except (CabBookingError, AttributeError, TypeError, ValueError):
            return False

    def payment_summary(self, client: Optional[Client], route: Optional[Route]) -> str:
        self._validate_payment_inputs(client, route)
        fare = self._fare_for(route, "generate payment summary")
        return (
            f"Payment Summary for {client.name}:\n"
            f"Fare: ${fare:.2f}\n"
            f"Card: {mask_card_number(client.credit_card)}\n"
            f"Email: {client.email}"
        )

    # ── Internals ─────────────────────────────────────────────────────

    @staticmethod
    def _validate_payment_inputs(client: Optional[Client], route: Optional[Route]) -> None:
        if client is None:
            raise InvalidPaymentError("Client cannot be null")
        if route is None:
            raise InvalidPaymentError("Route cannot be null")
        if not client.name or not client.name.strip():
            raise InvalidPaymentError("Client must have a valid name")
        if not client.email or not client.email.strip():
            raise InvalidPaymentError("Client must have a valid email for payment notifications")

    @staticmethod
    def _validate_amount(payment_amount: float) -> None:
        if (
            isinstance(payment_amount, bool)
            or not isinstance(payment_amount, (int, float))
            or not math.isfinite(payment_amount)
        ):
            raise InvalidPaymentError(f"Payment amount is invalid: {payment_amount}")
        if payment_amount <= 0:
            raise InvalidPaymentError(f"Payment amount must be positive: {payment_amount}")

    def _validate_card(self, card_number: Optional[str], card_on_file: Optional[str]) -> None:
        if not card_number or not card_number.strip():
            raise CreditCardError("Credit card number cannot be null or empty")
        if not is_valid_card_format(card_number, self.card_min_digits, self.card_max_digits):
            raise CreditCardError("Invalid credit card number format")
        if not card_on_file or not card_on_file.strip():
            raise CreditCardError("Client does not have a credit card on file")
        if normalize_card_number(card_number) != normalize_card_number(card_on_file):
            raise CreditCardError("Credit card number does not match card on file")

    def _fare_for(self, route: Route, action: str) -> float:
        try:
            fare = self.fare_calculator.fare(route.distance)
        except FareCalculationError as exc:
            raise PaymentProcessError(
                f"Cannot {action} due to fare calculation error: {exc}"
            ) from exc
        if fare <= 0:
            raise PaymentProcessError(f"Invalid fare calculated: {fare}")
        return fare
