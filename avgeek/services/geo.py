"""Great-circle geometry on a spherical Earth."""

from __future__ import annotations

import math

from avgeek.contracts.airport import Airport

EARTH_RADIUS_KM = 6371.0
KM_TO_NM = 0.539957


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in kilometers.

    Total: never raises.  Out-of-domain coordinates just produce a number
    (or NaN); validating them is the caller's job.
    """
    if not all(math.isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return math.nan
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a slightly outside [0, 1] near antipodes.
    a = min(max(a, 0.0), 1.0)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def airport_distance_km(origin: Airport, destination: Airport) -> float:
    return distance_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)


def km_to_nm(km: float) -> float:
    return km * KM_TO_NM
