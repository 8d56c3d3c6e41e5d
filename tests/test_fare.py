"""Unit tests for the fare calculator."""

import dataclasses

import pytest

from cabbooking.config import Settings
from cabbooking.domain.errors import FareCalculationError, ProcessError
from cabbooking.domain.fare import FareCalculator, FareConfig


class TestFareCalculator:
    def setup_method(self):
        self.calculator = FareCalculator()

    def test_defaults(self):
        assert self.calculator.booking_fee == 3.0
        assert self.calculator.per_mile_rate == 3.0

    def test_zero_distance_is_booking_fee(self):
        assert self.calculator.fare(0) == 3.0

    def test_ten_miles(self):
        assert self.calculator.fare(10) == 33.0  # 3 + 10*3

    def test_fractional_miles(self):
        assert self.calculator.fare(2.5) == pytest.approx(10.5)

    def test_negative_distance_raises(self):
        with pytest.raises(FareCalculationError, match="cannot be negative"):
            self.calculator.fare(-1)

    def test_nan_distance_raises(self):
        with pytest.raises(FareCalculationError):
            self.calculator.fare(float("nan"))

    def test_fare_error_is_a_process_error(self):
        with pytest.raises(ProcessError):
            self.calculator.fare(-0.01)


class TestFareConfig:
    def test_custom_rates(self):
        calculator = FareCalculator(FareConfig(booking_fee=5.0, per_mile_rate=2.0))
        assert calculator.fare(4) == 13.0

    def test_config_is_immutable(self):
        config = FareConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.booking_fee = 10.0  # type: ignore[misc]

    def test_negative_fee_rejected(self):
        with pytest.raises(ValueError):
            FareConfig(booking_fee=-1.0)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError):
            FareConfig(per_mile_rate=-0.5)

    def test_calculators_do_not_share_rates(self):
        cheap = FareCalculator(FareConfig(booking_fee=1.0, per_mile_rate=1.0))
        default = FareCalculator()
        assert cheap.fare(10) == 11.0
        assert default.fare(10) == 33.0

    def test_settings_build_fare_config(self):
        config = Settings(booking_fee=4.0, per_mile_rate=2.5).fare_config()
        assert config == FareConfig(booking_fee=4.0, per_mile_rate=2.5)
