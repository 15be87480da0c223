"""
modules/planning/itinerary_suggester.py
-----------------------------------------
Day-by-day suggestions for the unscheduled places of a trip.

Pipeline (pure, single pass, no I/O inside `suggest`):
  1. ProximityClusterer   → same-day groups (seed-radius, 5 km)
  2. sequence_places      → museum … nightlife … other order inside a group
  3. DurationEstimator    → visit + travel hours, one decimal
  4. assemble             → Suggestion(day=i+1, places, hours, description)

`suggest_for_trip` adds the single upstream read; any failure of that read
surfaces as SuggestionError and no partial list is ever returned.

`apply_suggestion` writes a chosen day back onto each place. Every place is
updated in its own transaction; there is no all-or-nothing guarantee and no
check against edits made since the suggestion was computed.
"""

from __future__ import annotations

import logging
from typing import Callable, ContextManager, Optional, Sequence

from schemas.itinerary import Suggestion
from schemas.place import Place
from modules.planning.category_sequencer import sequence_places
from modules.planning.duration_estimator import DurationEstimator
from modules.planning.proximity_clusterer import ProximityClusterer
from modules.observability.logger import StructuredLogger
from modules.validation import validate_day_number
from db.connection import get_conn
from db.repositories import place_repo

logger = logging.getLogger(__name__)


class SuggestionError(RuntimeError):
    """Suggestions could not be computed (upstream data fetch failed)."""


def describe(places: Sequence[Place]) -> str:
    """Human-readable summary: count and category diversity."""
    count = len(places)
    if count == 1:
        return "1 place to visit"
    distinct = len({p.category for p in places})
    noun = "category" if distinct == 1 else "categories"
    return f"{count} places to visit ({distinct} distinct {noun})"


class ItinerarySuggester:
    """
    Proposes one day per proximity cluster.

    Holds only configuration (clusterer, estimator, event log); every call
    keeps its working state local, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        clusterer: Optional[ProximityClusterer] = None,
        estimator: Optional[DurationEstimator] = None,
        events: Optional[StructuredLogger] = None,
    ) -> None:
        self.clusterer = clusterer or ProximityClusterer()
        self.estimator = estimator or DurationEstimator()
        self.events = events or StructuredLogger()

    # ── pure engine ───────────────────────────────────────────────────────

    def suggest(self, places: Sequence[Place]) -> list[Suggestion]:
        """
        Build suggestions for already-unscheduled places.

        The output partitions the input: every place appears in exactly one
        suggestion. No places → [].
        """
        return [
            self.assemble(day, cluster)
            for day, cluster in enumerate(self.clusterer.cluster(places), start=1)
        ]

    def assemble(self, day: int, cluster: Sequence[Place]) -> Suggestion:
        ordered = sequence_places(cluster)
        return Suggestion(
            day=day,
            places=ordered,
            estimated_duration=self.estimator.estimate(
                ordered,
                # a day with no geolocated place gets no travel estimate at all
                include_travel=any(p.has_coordinates for p in ordered),
            ),
            description=describe(ordered),
        )

    # ── service entry points ──────────────────────────────────────────────

    def suggest_for_trip(self, conn, trip_id: str) -> list[Suggestion]:
        """
        Fetch the unscheduled places of `trip_id` and suggest days for them.

        The caller has already checked that the user owns the trip.

        Raises:
            SuggestionError: the place fetch failed; the cause is chained.
        """
        self._emit(trip_id, "SUGGEST_START", {})
        try:
            places = place_repo.get_unscheduled_places(conn, trip_id)
        except Exception as exc:
            logger.exception("fetching unscheduled places for trip %s failed", trip_id)
            self._emit(trip_id, "SUGGEST_FAILED", {"error": repr(exc)})
            raise SuggestionError(
                f"Could not compute itinerary suggestions for trip {trip_id!r}"
            ) from exc

        suggestions = self.suggest(places)
        self._emit(trip_id, "SUGGEST_DONE", {
            "unscheduled": len(places),
            "days": [
                {"day": s.day, "places": s.place_ids, "hours": s.estimated_duration}
                for s in suggestions
            ],
        })
        logger.info(
            "trip %s: %d unscheduled places -> %d suggested days",
            trip_id, len(places), len(suggestions),
        )
        return suggestions

    def apply_suggestion(
        self,
        trip_id: str,
        day: int,
        place_ids: Sequence[str],
        conn_factory: Optional[Callable[[], ContextManager]] = None,
    ) -> list[dict]:
        """
        Assign `day` to every listed place of `trip_id`.

        Each place is read and updated in its own connection/transaction.
        A place that is missing or belongs to another trip is skipped; a
        database error on one place does not stop the others.

        Returns one {"place_id", "status"} dict per input id, status in
        "updated" | "not_found" | "failed".

        Raises:
            ValueError: `day` is not a positive integer.
        """
        check = validate_day_number(day)
        if not check:
            raise ValueError("; ".join(check.errors))
        conn_factory = conn_factory or get_conn

        results: list[dict] = []
        for place_id in place_ids:
            try:
                with conn_factory() as conn:
                    row = place_repo.get_place(conn, place_id)
                    if row is None or str(row["trip_id"]) != str(trip_id):
                        status = "not_found"
                    elif place_repo.update_place_day(conn, place_id, day):
                        status = "updated"
                    else:
                        status = "not_found"
            except Exception:
                logger.exception("assigning day %d to place %s failed", day, place_id)
                status = "failed"
            results.append({"place_id": place_id, "status": status})

        self._emit(trip_id, "SUGGEST_APPLIED", {"day": day, "results": results})
        return results

    # ── internals ─────────────────────────────────────────────────────────

    def _emit(self, trip_id: str, event_type: str, payload: dict) -> None:
        """Record an event; a write failure is logged, never raised."""
        try:
            self.events.log(trip_id, event_type, payload)
        except OSError as exc:
            logger.warning("could not record %s for trip %s: %s", event_type, trip_id, exc)
