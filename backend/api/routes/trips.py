"""
api/routes/trips.py
--------------------
GET  /v1/trips/{trip_id}/suggest-itinerary
POST /v1/trips/{trip_id}/apply-suggestion

Authentication happens upstream; the authenticated user id arrives in the
X-User-Id header. Both endpoints check trip ownership before touching places.

Error mapping:
    no X-User-Id header        → 401
    trip missing               → 404
    trip owned by another user → 403
    SuggestionError / DB error → 500 (one generic message, details logged)
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, Field

from db.connection import get_conn
from db.repositories import trip_repo
from db.repositories.trip_repo import TripAccessDenied, TripNotFoundError
from modules.planning.itinerary_suggester import ItinerarySuggester, SuggestionError

logger = logging.getLogger(__name__)

router = APIRouter()

_suggester = ItinerarySuggester()

SUGGEST_FAILED_DETAIL = "Could not generate itinerary suggestions"


# ── Request schemas ────────────────────────────────────────────────────────────

class ApplySuggestionRequest(BaseModel):
    day: int = Field(..., ge=1, description="Day number from the chosen suggestion")
    place_ids: list[str] = Field(..., min_length=1)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id


def _check_owner(conn, trip_id: str, user_id: str) -> None:
    try:
        trip_repo.assert_trip_owner(conn, trip_id, user_id)
    except TripNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Trip not found") from exc
    except TripAccessDenied as exc:
        raise HTTPException(status_code=403, detail="Access denied") from exc


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.get("/{trip_id}/suggest-itinerary", summary="Suggest days for unscheduled places")
def suggest_itinerary(
    trip_id: str,
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> list[dict]:
    """
    Groups the trip's unscheduled places by proximity and proposes one day
    per group. An empty list means there is nothing to schedule.
    """
    user_id = _require_user(x_user_id)
    try:
        with get_conn() as conn:
            _check_owner(conn, trip_id, user_id)
            suggestions = _suggester.suggest_for_trip(conn, trip_id)
    except HTTPException:
        raise
    except Exception as exc:
        if not isinstance(exc, SuggestionError):
            logger.exception("suggest-itinerary failed for trip %s", trip_id)
        raise HTTPException(status_code=500, detail=SUGGEST_FAILED_DETAIL) from exc

    return [s.to_dict() for s in suggestions]


@router.post("/{trip_id}/apply-suggestion", summary="Assign a suggested day to places")
def apply_suggestion(
    trip_id: str,
    req: ApplySuggestionRequest,
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> dict:
    """
    Sets day_index = `day` on every listed place, one independent update per
    place. The response reports the outcome for each place.
    """
    user_id = _require_user(x_user_id)
    try:
        with get_conn() as conn:
            _check_owner(conn, trip_id, user_id)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("ownership check failed for trip %s", trip_id)
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    results = _suggester.apply_suggestion(trip_id, req.day, req.place_ids)
    return {"trip_id": trip_id, "day": req.day, "results": results}
