"""
Fare Calculation
================

Formula
-------
Fare = Booking_Fee + Distance_Miles x Per_Mile_Rate

* **Booking_Fee** is the flat minimum charge: a zero-mile trip costs
  exactly the fee.
* The rate table lives in an immutable :class:`FareConfig` handed to the
  calculator at construction; nothing is read from module globals.

Complexity: O(1) per fare.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import FareCalculationError

DEFAULT_BOOKING_FEE = 3.0
DEFAULT_PER_MILE_RATE = 3.0


@dataclass(frozen=True)
class FareConfig:
    booking_fee: float = DEFAULT_BOOKING_FEE
    per_mile_rate: float = DEFAULT_PER_MILE_RATE

    def __post_init__(self) -> None:
        if self.booking_fee < 0:
            raise ValueError(f"Booking fee cannot be negative: {self.booking_fee}")
        if self.per_mile_rate < 0:
            raise ValueError(f"Per-mile rate cannot be negative: {self.per_mile_rate}")


class FareCalculator:
    """Turns a distance in miles into the amount owed.

    Stateless apart from its configuration, so one instance can be shared
    freely between workflows.
    """

    def __init__(self, config: FareConfig | None = None):
        self.config = config or FareConfig()

    @property
    def booking_fee(self) -> float:
        return self.config.booking_fee

    @property
    def per_mile_rate(self) -> float:
        return self.config.per_mile_rate

    def fare(self, distance_miles: float) -> float:
        """Return ``booking_fee + distance_miles * per_mile_rate``.

        A negative or non-finite distance means something upstream is
        broken, so it is raised rather than clamped.
        """
        if math.isnan(distance_miles) or math.isinf(distance_miles):
            raise FareCalculationError(f"Distance is not a finite number: {distance_miles}")
        if distance_miles < 0:
            raise FareCalculationError(f"Distance cannot be negative: {distance_miles}")
        return self.config.booking_fee + distance_miles * self.config.per_mile_rate
