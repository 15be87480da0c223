"""
schemas/place.py
----------------
Point-of-interest record as read from the `places` table.

A Place belongs to a trip. It is created, edited and deleted by the CRUD
layer; the suggestion engine only reads places whose day_index is NULL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class PlaceCategory(str, Enum):
    """Closed set of place categories (`places.type`)."""
    DINING = "dining"
    NIGHTLIFE = "nightlife"
    CAFE = "cafe"
    PHOTO_SPOT = "photo-spot"
    MUSEUM = "museum"
    ACTIVITY = "activity"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "PlaceCategory":
        """
        Resolve a raw column / request value to a category.

        Accepts the legacy short names written by older clients
        ("food", "bar", "photo"). Anything unrecognised becomes OTHER.
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        key = LEGACY_CATEGORY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


LEGACY_CATEGORY_ALIASES: dict[str, str] = {
    "food":  "dining",
    "bar":   "nightlife",
    "photo": "photo-spot",
    "photo_spot": "photo-spot",
}


@dataclass(frozen=True)
class Place:
    """
    One point of interest.

    lat / lng are either both set or both None; a place with a None on
    either axis is treated as having no coordinates.
    """
    id: str
    name: str
    category: PlaceCategory = PlaceCategory.OTHER
    address: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    day_index: Optional[int] = None
    notes: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None

    @property
    def is_unscheduled(self) -> bool:
        return self.day_index is None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Place":
        """Build a Place from a `places` row dict (DECIMAL columns → float)."""
        lat = row.get("lat")
        lng = row.get("lng")
        return cls(
            id=str(row["id"]),
            name=row["name"],
            category=PlaceCategory.parse(row.get("type")),
            address=row.get("address"),
            lat=float(lat) if lat is not None else None,
            lng=float(lng) if lng is not None else None,
            day_index=row.get("day_index"),
            notes=row.get("notes"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id":       self.id,
            "name":     self.name,
            "address":  self.address,
            "lat":      self.lat,
            "lng":      self.lng,
            "type":     self.category.value,
            "dayIndex": self.day_index,
            "notes":    self.notes,
        }
