"""
modules/tool_usage/distance_tool.py
-------------------------------------
Great-circle distance and hop travel time between places.
No external HTTP calls are made.

Config knobs (config.py):
  SUGGEST_TRAVEL_SPEED_KMH     -- average urban speed for hop travel time (default: 30)
  SUGGEST_DEFAULT_TRAVEL_HOURS -- hop time when a place has no coordinates (default: 0.5)
"""

from __future__ import annotations
import math
import logging
from typing import Optional

import config
from schemas.place import Place

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pure maths
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points (Haversine formula) in km."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lam = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _km_to_hours(km: float, speed_kmh: float) -> float:
    """Straight-line km to hours at a given speed."""
    return km / speed_kmh


# ---------------------------------------------------------------------------
# DistanceTool
# ---------------------------------------------------------------------------


class DistanceTool:
    """
    Computes distances and travel times between places using the Haversine
    formula plus a configurable average speed.
    """

    def __init__(
        self,
        speed_kmh: Optional[float] = None,
        default_travel_hours: Optional[float] = None,
    ) -> None:
        self.speed_kmh: float = (
            speed_kmh if speed_kmh is not None else config.SUGGEST_TRAVEL_SPEED_KMH
        )
        self.default_travel_hours: float = (
            default_travel_hours
            if default_travel_hours is not None
            else config.SUGGEST_DEFAULT_TRAVEL_HOURS
        )
        if self.speed_kmh <= 0:
            raise ValueError(f"speed_kmh must be > 0 (got {self.speed_kmh})")

    def distance_km(self, a: Place, b: Place) -> float:
        """Haversine distance in km between two geolocated places."""
        if not (a.has_coordinates and b.has_coordinates):
            raise ValueError(
                f"distance_km needs coordinates on both places "
                f"(got {a.id!r}={a.lat},{a.lng} and {b.id!r}={b.lat},{b.lng})"
            )
        return haversine_km(a.lat, a.lng, b.lat, b.lng)  # type: ignore[arg-type]

    def travel_time_hours(self, a: Place, b: Place) -> float:
        """
        Travel time in hours for the hop a → b.

        Falls back to default_travel_hours when either place has no
        coordinates.
        """
        if not (a.has_coordinates and b.has_coordinates):
            logger.debug(
                "hop %s -> %s has no coordinates; using %.2f h",
                a.id, b.id, self.default_travel_hours,
            )
            return self.default_travel_hours
        return _km_to_hours(self.distance_km(a, b), self.speed_kmh)
