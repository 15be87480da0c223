"""
schemas/itinerary.py
--------------------
Dataclass definitions for the itinerary suggestions returned to the client.

Suggestions are derived on every request and never persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from schemas.place import Place


@dataclass
class Suggestion:
    """
    One proposed day plan.

    day                 1-based position in the suggestion list; unrelated to
                        any day_index already used elsewhere in the trip
    places              stops in visiting order
    estimated_duration  visit + travel time in hours, one decimal
    description         e.g. "3 places to visit (2 distinct categories)"
    """
    day: int = 1
    places: list[Place] = field(default_factory=list)
    estimated_duration: float = 0.0
    description: str = ""

    @property
    def place_ids(self) -> list[str]:
        return [p.id for p in self.places]

    def to_dict(self) -> dict[str, Any]:
        return {
            "day":               self.day,
            "places":            [p.to_dict() for p in self.places],
            "estimatedDuration": self.estimated_duration,
            "description":       self.description,
        }
