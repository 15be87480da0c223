"""
db/
----
Database access layer for the Trip Planner suggestion service.

Storage architecture:
  PostgreSQL (psycopg2): trips and places owned by the CRUD layer
    tables: trips, places
    schema: db/schema.sql
    apply:  python scripts/run_migrations.py

The suggestion engine only reads unscheduled places and, when the client
applies a suggestion, writes places.day_index one row at a time.

Public exports (import from here for convenience):
    from db import get_conn
    from db.repositories import place_repo, trip_repo
"""

from db.connection import get_conn, close_pool, ping

__all__ = ["get_conn", "close_pool", "ping"]
