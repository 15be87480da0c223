"""
db/repositories/trip_repo.py
------------------------------
Read access to the `trips` table plus the ownership guard used before any
place of a trip is read or written.

All functions accept a psycopg2 connection object.
Commit/rollback is managed by the caller via db.connection.get_conn().
"""

from __future__ import annotations


class TripNotFoundError(LookupError):
    """No trip row with the requested id."""


class TripAccessDenied(PermissionError):
    """The trip exists but belongs to another user."""


def get_trip(conn, trip_id: str) -> dict | None:
    """Return a single trip row by id, or None if not found."""
    sql = """
        SELECT id, user_id, name, destination, start_date, end_date,
               is_public, slug, created_at
        FROM trips
        WHERE id = %s
    """
    with conn.cursor() as cur:
        cur.execute(sql, (trip_id,))
        row = cur.fetchone()
        if row is None:
            return None
        cols = [d[0] for d in cur.description]
        return dict(zip(cols, row))


def assert_trip_owner(conn, trip_id: str, user_id: str) -> dict:
    """
    Return the trip row if `user_id` owns it.

    Raises:
        TripNotFoundError: no such trip
        TripAccessDenied:  trip owned by someone else
    """
    trip = get_trip(conn, trip_id)
    if trip is None:
        raise TripNotFoundError(f"Trip {trip_id!r} not found")
    if str(trip["user_id"]) != str(user_id):
        raise TripAccessDenied(f"Trip {trip_id!r} is not owned by user {user_id!r}")
    return trip
