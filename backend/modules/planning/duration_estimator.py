"""
modules/planning/duration_estimator.py
----------------------------------------
Time budget for an ordered day of places.

  total = Σ visit_duration(category)  +  Σ travel_time(p_i, p_i+1)

rounded to one decimal (hours). A single place, or no place at all, has no
travel term.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from schemas.place import Place, PlaceCategory
from modules.tool_usage.distance_tool import DistanceTool


# Visit duration per category, in hours
VISIT_DURATION_HOURS: Mapping[PlaceCategory, float] = MappingProxyType({
    PlaceCategory.DINING:     1.5,
    PlaceCategory.NIGHTLIFE:  2.0,
    PlaceCategory.CAFE:       0.5,
    PlaceCategory.PHOTO_SPOT: 0.5,
    PlaceCategory.MUSEUM:     2.5,
    PlaceCategory.ACTIVITY:   2.0,
    PlaceCategory.OTHER:      1.0,
})


def visit_duration_hours(category: PlaceCategory) -> float:
    """Fixed visit duration for a category (hours)."""
    return VISIT_DURATION_HOURS.get(category, VISIT_DURATION_HOURS[PlaceCategory.OTHER])


def round_hours(hours: float) -> float:
    """Round half up to one decimal (2.25 -> 2.3)."""
    return math.floor(hours * 10 + 0.5) / 10


class DurationEstimator:
    """Sums visit and hop travel times over an ordered sequence of places."""

    def __init__(self, distance_tool: Optional[DistanceTool] = None) -> None:
        self.distance_tool = distance_tool or DistanceTool()

    def travel_hours(self, places: Sequence[Place]) -> float:
        """Unrounded travel time over consecutive pairs."""
        return sum(
            self.distance_tool.travel_time_hours(a, b)
            for a, b in zip(places, places[1:])
        )

    def visit_hours(self, places: Sequence[Place]) -> float:
        """Unrounded visit time."""
        return sum(visit_duration_hours(p.category) for p in places)

    def estimate(self, places: Sequence[Place], include_travel: bool = True) -> float:
        """Total hours for the day, rounded to one decimal."""
        hours = self.visit_hours(places)
        if include_travel:
            hours += self.travel_hours(places)
        return round_hours(hours)
