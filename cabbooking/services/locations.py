"""
In-memory location catalog.

Seeded with Washington DC points of interest; names are unique keys.
Bad names or coordinates raise
:class:`~cabbooking.domain.errors.LocationInvalidError`.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from cabbooking.domain.entities import Location
from cabbooking.domain.errors import LocationInvalidError, LocationNotFoundError

logger = logging.getLogger(__name__)

WASHINGTON_DC_LOCATIONS: list[tuple[str, float, float]] = [
    # Airports & transportation hubs
    ("Ronald Reagan Washington National Airport", 38.8512, -77.0402),
    ("Washington Dulles International Airport", 38.9531, -77.4565),
    ("Union Station", 38.8973, -77.0063),
    ("Metro Center Station", 38.8983, -77.0281),
    # Government & monuments
    ("The White House", 38.8977, -77.0365),
    ("U.S. Capitol Building", 38.8899, -77.0091),
    ("Lincoln Memorial", 38.8893, -77.0502),
    ("Washington Monument", 38.8895, -77.0353),
    ("Jefferson Memorial", 38.8814, -77.0365),
    ("Supreme Court", 38.8906, -77.0047),
    ("Pentagon", 38.8718, -77.0563),
    # Museums & cultural sites
    ("Smithsonian National Museum of Natural History", 38.8913, -77.0261),
    ("National Air and Space Museum", 38.8882, -77.0199),
    ("National Gallery of Art", 38.8913, -77.0200),
    ("Kennedy Center", 38.8957, -77.0556),
    # Neighbourhoods
    ("Georgetown", 38.9097, -77.0654),
    ("Dupont Circle", 38.9096, -77.0434),
    ("Navy Yard", 38.8764, -77.0030),
]


def validate_coordinates(latitude: float, longitude: float) -> None:
    if math.isnan(latitude) or math.isnan(longitude):
        raise LocationInvalidError("Coordinates cannot be NaN")
    if math.isinf(latitude) or math.isinf(longitude):
        raise LocationInvalidError("Coordinates cannot be infinite")
    if not -90.0 <= latitude <= 90.0:
        raise LocationInvalidError(f"Latitude must be between -90 and 90, got: {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise LocationInvalidError(f"Longitude must be between -180 and 180, got: {longitude}")


class LocationService:
    def __init__(self) -> None:
        self._locations: dict[str, Location] = {}

    def initialize_washington_dc_locations(self) -> None:
        self._locations.clear()
        for name, lat, lng in WASHINGTON_DC_LOCATIONS:
            self.create_location(name, lat, lng)
        logger.info("Loaded %d Washington DC locations", len(self._locations))

    def create_location(self, name: Optional[str], latitude: float, longitude: float) -> Location:
        if not name or not name.strip():
            raise LocationInvalidError("Location name cannot be null or empty")
        validate_coordinates(latitude, longitude)

        location = Location.at(latitude, longitude, name=name.strip())
        self._locations[location.name] = location
        logger.debug("Location created: %s", location)
        return location

    def update_location(
        self, name: str, new_name: Optional[str], latitude: float, longitude: float
    ) -> Location:
        if name not in self._locations:
            raise LocationNotFoundError(f"Location does not exist in the system: {name}")
        if not new_name or not new_name.strip():
            raise LocationInvalidError("Location name cannot be null or empty")
        validate_coordinates(latitude, longitude)

        del self._locations[name]
        location = Location.at(latitude, longitude, name=new_name.strip())
        self._locations[location.name] = location
        logger.info("Location updated: %s -> %s", name, location)
        return location

    def find_location_by_name(self, name: Optional[str]) -> Optional[Location]:
        if not name or not name.strip():
            return None
        return self._locations.get(name.strip())

    def get_location(self, name: Optional[str]) -> Location:
        location = self.find_location_by_name(name)
        if location is None:
            raise LocationNotFoundError(f"Location not found: {name}")
        return location

    def available_locations(self) -> list[Location]:
        return list(self._locations.values())
