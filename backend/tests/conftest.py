"""Shared fixtures: place factory, temp event log, open-file tracking, mocked psycopg2 connections."""

from __future__ import annotations

import math
from itertools import count
from unittest.mock import MagicMock, patch

import pytest

from schemas.place import Place, PlaceCategory
from modules.observability.logger import StructuredLogger

KM_PER_DEG_LAT = 6371.0 * math.pi / 180.0

_ids = count(1)


def make_place(
    category: PlaceCategory | str = PlaceCategory.OTHER,
    lat: float | None = None,
    lng: float | None = None,
    name: str | None = None,
    place_id: str | None = None,
    **extra,
) -> Place:
    pid = place_id or f"p{next(_ids)}"
    return Place(
        id=pid,
        name=name or f"Place {pid}",
        category=PlaceCategory.parse(category),
        lat=lat,
        lng=lng,
        **extra,
    )


def offset(lat: float, lng: float, north_km: float = 0.0, east_km: float = 0.0) -> tuple[float, float]:
    """Shift a coordinate by a small distance (flat-earth approximation)."""
    d_lat = north_km / KM_PER_DEG_LAT
    d_lng = east_km / (KM_PER_DEG_LAT * math.cos(math.radians(lat)))
    return lat + d_lat, lng + d_lng


@pytest.fixture
def events(tmp_path) -> StructuredLogger:
    return StructuredLogger(logs_dir=tmp_path / "logs")


@pytest.fixture
def open_files():
    """Every file handle the event logger opens while the fixture is active."""
    opened = []
    real_open = open

    def tracking_open(*args, **kwargs):
        fh = real_open(*args, **kwargs)
        opened.append(fh)
        return fh

    with patch("modules.observability.logger.open", side_effect=tracking_open, create=True):
        yield opened


def mock_conn(rows=None, columns=(), one=None, rowcount=0, error=None):
    """
    psycopg2-like connection whose cursor() context manager yields a cursor
    returning `rows` from fetchall() and `one` from fetchone().
    """
    cur = MagicMock()
    cur.description = [(c,) for c in columns]
    cur.fetchall.return_value = rows or []
    cur.fetchone.return_value = one
    cur.rowcount = rowcount
    if error is not None:
        cur.execute.side_effect = error

    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cur
    conn.cursor.return_value.__exit__.return_value = False
    return conn, cur
