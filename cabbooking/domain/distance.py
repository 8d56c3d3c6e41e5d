"""
Distance calculation using the Haversine formula.

Assumption
----------
Distances are great-circle (straight-line over the sphere) between the
two coordinates, not road-network distances.  Bookings are priced per
mile, so callers normally go through :func:`distance_miles`.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Location

EARTH_RADIUS_KM = 6_371.0
MILES_PER_KM = 0.621371


def distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    # rounding can push a past 1.0 near antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def distance_miles(loc_a: Location, loc_b: Location) -> float:
    """Great-circle distance in **miles** between two locations.

    Only the coordinates take part; location names are ignored.
    """
    a, b = loc_a.coordinate, loc_b.coordinate
    return km_to_miles(
        distance_km(a.latitude, a.longitude, b.latitude, b.longitude)
    )
