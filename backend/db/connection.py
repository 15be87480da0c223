"""
db/connection.py
-----------------
Process-wide psycopg2 connection pool for the suggestion service.

    from db.connection import get_conn

    with get_conn() as conn:
        places = place_repo.get_unscheduled_places(conn, trip_id)

get_conn() lends one pooled connection for the duration of the block:
commit when the block exits cleanly, rollback and re-raise otherwise, and
always hand the connection back. Applying a suggestion opens one block per
place, so each day assignment is its own transaction.

Settings come from config.py (POSTGRES_* environment variables).
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator

import psycopg2
import psycopg2.extensions
import psycopg2.pool

import config

APPLICATION_NAME = "tripplanner-suggestions"

_pool: psycopg2.pool.ThreadedConnectionPool | None = None
_pool_lock = threading.Lock()


def connect_kwargs() -> dict[str, Any]:
    """libpq keyword arguments shared by the pool and one-off scripts."""
    return {
        "host":             config.POSTGRES_HOST,
        "port":             config.POSTGRES_PORT,
        "dbname":           config.POSTGRES_DB,
        "user":             config.POSTGRES_USER,
        "password":         config.POSTGRES_PASSWORD,
        "connect_timeout":  config.POSTGRES_CONNECT_TIMEOUT,
        "application_name": APPLICATION_NAME,
    }


def get_pool() -> psycopg2.pool.ThreadedConnectionPool:
    """Return the shared pool, (re)creating it if missing or closed."""
    global _pool
    with _pool_lock:
        if _pool is None or _pool.closed:
            _pool = psycopg2.pool.ThreadedConnectionPool(
                config.POSTGRES_MIN_CONN,
                config.POSTGRES_MAX_CONN,
                **connect_kwargs(),
            )
        return _pool


@contextmanager
def get_conn() -> Iterator[psycopg2.extensions.connection]:
    """Borrow a connection; commit on success, rollback on error."""
    pool = get_pool()
    conn = pool.getconn()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        pool.putconn(conn)


def ping() -> None:
    """Run SELECT 1 on a pooled connection; raises if the database is unreachable."""
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT 1")
            cur.fetchone()


def close_pool() -> None:
    """Close every pooled connection (application shutdown)."""
    global _pool
    with _pool_lock:
        if _pool is not None and not _pool.closed:
            _pool.closeall()
        _pool = None
