"""Geographic point and great-circle distance."""

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Point:
    lat: float
    lng: float

    def earth_distance_from(self, other: "Point") -> float:
        """Distance in kilometers to another point on Earth."""
        return earth_distance_from(self, other)


def earth_distance_from(a: Point, b: Point) -> float:
    """Great-circle distance in kilometers using the Haversine formula.

    Assumes a spherical Earth with mean radius EARTH_RADIUS_KM. Coordinates
    are degrees and are not range checked.
    """
    lat_a = math.radians(a.lat)
    lat_b = math.radians(b.lat)
    delta_lat = math.radians(a.lat - b.lat)
    delta_lng = math.radians(a.lng - b.lng)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat_a) * math.cos(lat_b) * math.sin(delta_lng / 2) ** 2
    )
    # Rounding can push h just past 1.0 for antipodal points.
    h = min(max(h, 0.0), 1.0)
    distance = EARTH_RADIUS_KM * 2 * math.asin(math.sqrt(h))

    logger.debug(
        "Distance between (%s, %s) and (%s, %s) is %.1f km",
        a.lat, a.lng, b.lat, b.lng, distance,
    )
    return distance
