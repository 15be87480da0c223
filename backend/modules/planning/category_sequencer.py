"""
modules/planning/category_sequencer.py
----------------------------------------
Visiting order inside one suggested day: sights first, food and drinks later.

  museum(1) < activity(2) < photo-spot(3) < dining(4) < cafe(5) < nightlife(6) < other(7)

The sort is stable, so places sharing a priority keep their input order.
Travel distance is not considered.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from schemas.place import Place, PlaceCategory

CATEGORY_PRIORITY: Mapping[PlaceCategory, int] = MappingProxyType({
    PlaceCategory.MUSEUM:     1,
    PlaceCategory.ACTIVITY:   2,
    PlaceCategory.PHOTO_SPOT: 3,
    PlaceCategory.DINING:     4,
    PlaceCategory.CAFE:       5,
    PlaceCategory.NIGHTLIFE:  6,
    PlaceCategory.OTHER:      7,
})

_LOWEST_PRIORITY: int = max(CATEGORY_PRIORITY.values())


def category_priority(category: PlaceCategory) -> int:
    return CATEGORY_PRIORITY.get(category, _LOWEST_PRIORITY)


def sequence_places(places: Sequence[Place]) -> list[Place]:
    """Return a new list ordered by category priority (stable)."""
    return sorted(places, key=lambda p: category_priority(p.category))
