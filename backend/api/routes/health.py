"""
api/routes/health.py
--------------------
Health-check endpoints, used by load balancers, Docker health probes, etc.

GET /v1/health     process is up; echoes the suggestion engine constants
GET /v1/health/db  Postgres answers SELECT 1
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

import config
from db.connection import ping

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health check")
def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {
        "status": "ok",
        "service": "tripplanner-suggestions",
        "suggest": {
            "cluster_radius_km":    config.SUGGEST_CLUSTER_RADIUS_KM,
            "travel_speed_kmh":     config.SUGGEST_TRAVEL_SPEED_KMH,
            "default_travel_hours": config.SUGGEST_DEFAULT_TRAVEL_HOURS,
        },
    }


@router.get("/health/db", summary="Database health check")
def health_db() -> dict:
    """Returns 200 when a pooled connection can run a query, 503 otherwise."""
    try:
        ping()
    except Exception as exc:
        logger.warning("database health check failed: %s", exc)
        raise HTTPException(status_code=503, detail="Database unavailable") from exc
    return {"status": "ok", "database": config.POSTGRES_DB}
