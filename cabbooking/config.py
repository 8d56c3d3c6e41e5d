"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings

from cabbooking.domain.fare import FareConfig


class Settings(BaseSettings):
    # Fare table
    booking_fee: float = 3.0  # USD, flat minimum charge
    per_mile_rate: float = 3.0  # USD / mile

    # Booking
    distance_tolerance_miles: float = 0.05  # booked vs recomputed distance

    # Payment
    payment_tolerance: float = 0.01  # one cent
    card_min_digits: int = 13
    card_max_digits: int = 19

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    def fare_config(self) -> FareConfig:
        return FareConfig(booking_fee=self.booking_fee, per_mile_rate=self.per_mile_rate)


settings = Settings()
