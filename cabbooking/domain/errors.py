"""
Error taxonomy
==============

Two families hang off :class:`CabBookingError`:

* :class:`InvalidInputError` -- the caller supplied bad data.  Never
  retried; the embedding layer answers with a 4xx.
* :class:`ProcessError` -- a collaborator failed during an otherwise
  valid operation.  The message embeds the cause text verbatim; the
  embedding layer answers with a 5xx.

Route and location providers raise :class:`CollaboratorError`
subclasses, which the workflows translate into process errors.
"""


class CabBookingError(Exception):
    """Base class for every error raised by this package."""


# ── Invalid input (4xx) ───────────────────────────────────────────────


class InvalidInputError(CabBookingError):
    pass


class InvalidBookingError(InvalidInputError):
    pass


class InvalidPaymentError(InvalidInputError):
    pass


class CreditCardError(InvalidInputError):
    """Card number missing, malformed, or not the card on file."""


class InvalidClientError(InvalidInputError):
    pass


class ClientNotFoundError(InvalidInputError):
    pass


# ── Process failures (5xx) ────────────────────────────────────────────


class ProcessError(CabBookingError):
    pass


class BookingProcessError(ProcessError):
    pass


class PaymentProcessError(ProcessError):
    pass


class BookingCompletionError(PaymentProcessError):
    """The payment went through but the booking could not be completed."""

    payment_accepted = True


class FareCalculationError(ProcessError):
    pass


# ── Collaborator failures ─────────────────────────────────────────────


class CollaboratorError(CabBookingError):
    pass


class RouteInvalidError(CollaboratorError):
    pass


class LocationInvalidError(CollaboratorError):
    pass


class LocationNotFoundError(LocationInvalidError):
    pass
