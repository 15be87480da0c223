"""
db/repositories/place_repo.py
------------------------------
Read / day-assignment operations on the `places` table.

Creating, editing and deleting places is the CRUD layer's job; this module
only covers what the suggestion engine consumes (unscheduled places of a
trip) and what applying a suggestion produces (one day_index update per
place).

All functions accept a psycopg2 connection object.
Commit/rollback is managed by the caller via db.connection.get_conn().
"""

from __future__ import annotations

import logging

from schemas.place import Place
from modules.validation import filter_valid

logger = logging.getLogger(__name__)

_PLACE_COLUMNS = """
    id, trip_id, name, address, lat, lng, type::text AS type,
    day_index, notes, created_at
"""


def get_unscheduled_places(conn, trip_id: str) -> list[Place]:
    """
    Return the places of a trip with no assigned day.

    Ordered by creation time (then id) so repeated calls feed the clusterer
    the same input order. Malformed rows are logged but still returned.
    """
    sql = f"""
        SELECT {_PLACE_COLUMNS}
        FROM places
        WHERE trip_id = %s AND day_index IS NULL
        ORDER BY created_at ASC, id ASC
    """
    with conn.cursor() as cur:
        cur.execute(sql, (trip_id,))
        cols = [d[0] for d in cur.description]
        rows = [dict(zip(cols, row)) for row in cur.fetchall()]

    _, rejected = filter_valid(rows)
    for result in rejected:
        logger.warning(
            "place %s in trip %s failed validation: %s",
            result.record.get("id"), trip_id, "; ".join(result.errors),
        )
    return [Place.from_row(row) for row in rows]


def get_place(conn, place_id: str) -> dict | None:
    """Return a single place row (with its trip_id) by id, or None."""
    sql = f"SELECT {_PLACE_COLUMNS} FROM places WHERE id = %s"
    with conn.cursor() as cur:
        cur.execute(sql, (place_id,))
        row = cur.fetchone()
        if row is None:
            return None
        cols = [d[0] for d in cur.description]
        return dict(zip(cols, row))


def update_place_day(conn, place_id: str, day_index: int | None) -> bool:
    """
    Set places.day_index for one place. None unschedules it.

    No version check is made: a concurrent edit between suggestion and
    apply is overwritten. Returns False if the place no longer exists.
    """
    sql = "UPDATE places SET day_index = %s WHERE id = %s"
    with conn.cursor() as cur:
        cur.execute(sql, (day_index, place_id))
        return cur.rowcount > 0
