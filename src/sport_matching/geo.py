"""Great-circle distance between two coordinates."""

from math import atan2, cos, isfinite, nan, radians, sin, sqrt

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute the Haversine distance in kilometers.

    Longitude wraparound needs no special handling since sin/cos are
    periodic. Non-finite coordinates yield NaN instead of raising.
    """
    if not all(isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return nan

    d_lat = radians(lat2 - lat1)
    d_lon = radians(lon2 - lon1)

    a = sin(d_lat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(d_lon / 2) ** 2
    # Rounding (or out-of-range latitudes) can push a slightly outside [0, 1]
    a = min(max(a, 0.0), 1.0)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_KM * c
