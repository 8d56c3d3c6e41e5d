"""Domain enumerations and state-transition rules."""

import enum


class BookingStatus(str, enum.Enum):
    OPEN = "OPEN"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


# State machine: maps current status -> set of valid next statuses
BOOKING_TRANSITIONS: dict[BookingStatus, set[BookingStatus]] = {
    BookingStatus.OPEN: {BookingStatus.ACTIVE},
    BookingStatus.ACTIVE: {BookingStatus.COMPLETED},
    BookingStatus.COMPLETED: set(),
}


class ValidationReason(str, enum.Enum):
    """Booking rules, listed in the order they are checked."""

    CLIENT_MISSING = "CLIENT_MISSING"
    ROUTE_MISSING = "ROUTE_MISSING"
    CLIENT_ID_INVALID = "CLIENT_ID_INVALID"
    CLIENT_NAME_INVALID = "CLIENT_NAME_INVALID"
    CLIENT_EMAIL_INVALID = "CLIENT_EMAIL_INVALID"
    ROUTE_ENDPOINTS_MISSING = "ROUTE_ENDPOINTS_MISSING"
    ROUTE_DISTANCE_NEGATIVE = "ROUTE_DISTANCE_NEGATIVE"
    SAME_PICKUP_AND_DESTINATION = "SAME_PICKUP_AND_DESTINATION"
